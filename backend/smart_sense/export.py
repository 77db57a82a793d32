from __future__ import annotations
import re
from pathlib import Path
from typing import Optional, Union

EXPORT_EXTENSION = ".txt"

_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[\\/]+")


def _slug(value: str) -> str:
	slug = _WHITESPACE_RE.sub("_", value.strip())
	# Keep the export inside its directory
	return _SEPARATOR_RE.sub("_", slug)


def export_filename(panel: str, subject: Optional[str] = None) -> str:
	"""
	Filename for an exported panel result.

	The writer panel exports as `<tool>_result.txt` (subject is the tool),
	roadmaps and medical information embed their topic, e.g.
	`learning_roadmap_machine_learning.txt`, and any other panel exports as
	`<panel>_result.txt`.
	"""
	if panel == "roadmap":
		return f"learning_roadmap_{_slug(subject or '')}{EXPORT_EXTENSION}"
	if panel == "medical-info":
		return f"medical_info_{_slug(subject or '')}{EXPORT_EXTENSION}"
	if panel == "writer" and subject:
		return f"{_slug(subject)}_result{EXPORT_EXTENSION}"
	return f"{_slug(panel)}_result{EXPORT_EXTENSION}"


def export_text(content: str, filename: str, directory: Union[str, Path]) -> Path:
	target_dir = Path(directory)
	target_dir.mkdir(parents=True, exist_ok=True)
	path = target_dir / Path(filename).name
	path.write_text(content, encoding="utf-8")
	return path

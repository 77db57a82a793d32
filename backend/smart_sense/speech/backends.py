"""Loaders for the optional voice backends (``pip install 'smart-sense-ai[voice]'``)."""

from __future__ import annotations

from ..errors import SpeechUnavailableError
from .interfaces import AudioSink, RecognitionEngine

_INSTALL_HINT = "Install extras with: pip install 'smart-sense-ai[voice]'"


def cloud_engine_factory(language: str) -> RecognitionEngine:
	try:
		from .cloud_engine import CloudSpeechEngine
	except (ImportError, OSError) as exc:
		raise SpeechUnavailableError(f"Speech recognition backend unavailable. {_INSTALL_HINT}") from exc
	return CloudSpeechEngine(language)


def sounddevice_sink_factory() -> AudioSink:
	try:
		from .playback import SoundDeviceSink
	except (ImportError, OSError) as exc:
		raise SpeechUnavailableError(f"Audio output backend unavailable. {_INSTALL_HINT}") from exc
	return SoundDeviceSink()

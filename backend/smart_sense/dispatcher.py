"""
Generation dispatcher.

Sends one built prompt to Gemini and turns the answer into a
`GenerationResult`. Structured tasks ask for a JSON object matching
`STRUCTURED_RESULT_SCHEMA`; every other task takes the response text as is.
"""

from __future__ import annotations

import json
import logging
import unicodedata
from typing import Any, Dict, Optional

from .errors import MalformedResponseError, normalize
from .gemini_client import GeminiClient
from .models import GenerationRequest, GenerationResult, PlainResult, ResultShape, StructuredResult
from .prompts import Prompt, build_prompt
from .settings import Settings

logger = logging.getLogger(__name__)

_ZWJ = "\u200d"

STRUCTURED_RESULT_SCHEMA: Dict[str, Any] = {
	"type": "OBJECT",
	"properties": {
		"text": {"type": "STRING", "description": "The generated content."},
		"percentage": {
			"type": "INTEGER",
			"description": "A percentage score for the content (e.g., believability, sincerity).",
		},
		"emoji": {"type": "STRING", "description": "A single emoji that fits the tone of the content."},
	},
	"required": ["text", "percentage", "emoji"],
}


def _extends_glyph(char: str) -> bool:
	codepoint = ord(char)
	return (
		unicodedata.category(char) in ("Mn", "Mc", "Me")
		# variation selectors, skin tones, flag tags
		or 0xFE00 <= codepoint <= 0xFE0F
		or 0x1F3FB <= codepoint <= 0x1F3FF
		or 0xE0020 <= codepoint <= 0xE007F
	)


def _is_regional_indicator(char: str) -> bool:
	return 0x1F1E6 <= ord(char) <= 0x1F1FF


def first_glyph(value: str) -> str:
	"""
	First user-perceived character of `value`.

	Keeps emoji sequences whole: modifiers, variation selectors, keycaps,
	zero-width-joiner sequences and regional-indicator flags.
	"""
	value = value.strip()
	if not value:
		return ""
	end = 1
	if len(value) > 1 and _is_regional_indicator(value[0]) and _is_regional_indicator(value[1]):
		end = 2
	while end < len(value):
		if _extends_glyph(value[end]):
			end += 1
		elif value[end] == _ZWJ and end + 1 < len(value):
			end += 2
		else:
			break
	return value[:end]


def parse_structured(raw: str) -> StructuredResult:
	"""
	Parse the JSON payload of a structured response.

	The percentage is clamped into 0..100 and the emoji is cut down to its
	first glyph group, so a chatty model cannot break the result contract.

	Raises:
		MalformedResponseError: If the payload is not JSON or misses a field
	"""
	try:
		data = json.loads(raw)
	except (TypeError, ValueError) as err:
		raise MalformedResponseError(f"Structured response is not valid JSON: {raw!r}") from err
	if not isinstance(data, dict):
		raise MalformedResponseError(f"Structured response is not a JSON object: {raw!r}")
	try:
		text = str(data["text"]).strip()
		percentage = int(data["percentage"])
		emoji = str(data["emoji"]).strip()
	except (KeyError, TypeError, ValueError) as err:
		raise MalformedResponseError(f"Structured response is missing fields: {data}") from err
	emoji = first_glyph(emoji)
	if not emoji:
		raise MalformedResponseError("Structured response has an empty emoji")
	return StructuredResult(text=text, percentage=max(0, min(100, percentage)), emoji=emoji)


class GenerationDispatcher:
	def __init__(self, client: GeminiClient, config: Optional[Settings] = None) -> None:
		self._client = client
		self._config = config

	async def dispatch(self, instruction: str, shape: ResultShape, *, model: Optional[str] = None) -> GenerationResult:
		"""One round trip. Raises on transport errors and malformed structured payloads."""
		if shape is ResultShape.STRUCTURED:
			raw = await self._client.generate(instruction, model=model, response_schema=STRUCTURED_RESULT_SCHEMA)
			return parse_structured(raw)
		text = await self._client.generate(instruction, model=model)
		return PlainResult(text=text)

	async def run(self, prompt: Prompt) -> GenerationResult:
		logger.debug("Dispatching %s prompt to %s", prompt.task.value, prompt.model)
		return await self.dispatch(prompt.instruction, prompt.shape, model=prompt.model)

	async def generate(self, req: GenerationRequest) -> GenerationResult:
		# Every failure becomes the task's fallback value
		prompt = build_prompt(req, self._config)
		try:
			return await self.run(prompt)
		except Exception as err:
			return normalize(err, prompt.task)

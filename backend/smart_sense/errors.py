"""
Error taxonomy and the fallback normalizer.

Every failure of a generation call ends up in `normalize`, which turns it into
a displayable result of the right shape for the task and never raises.
"""

from __future__ import annotations

import logging

from .models import GenerationResult, PlainResult, ResultShape, StructuredResult, TaskKind

logger = logging.getLogger(__name__)

FALLBACK_EMOJI = "😞"


class SmartSenseError(Exception):
	"""Base class for errors raised inside the service."""


class MissingCredentialError(SmartSenseError):
	"""No Gemini API key is configured."""


class GenerationError(SmartSenseError):
	"""A round trip against the generative API failed."""


class MalformedResponseError(GenerationError):
	"""The API answered, but not with the shape that was asked for."""


class SpeechUnavailableError(SmartSenseError):
	"""The optional speech backend cannot be loaded on this host."""


def fallback_text(task: TaskKind) -> str:
	return f"Sorry, I encountered an error in {task.value}. Please try again."


def fallback_for(task: TaskKind) -> GenerationResult:
	text = fallback_text(task)
	if task.shape is ResultShape.STRUCTURED:
		return StructuredResult(text=text, percentage=0, emoji=FALLBACK_EMOJI)
	return PlainResult(text=text)


def normalize(error: BaseException, task: TaskKind) -> GenerationResult:
	"""Log `error` and return the fallback result for `task`."""
	logger.error("Error in %s: %s", task.value, error, exc_info=error)
	return fallback_for(task)

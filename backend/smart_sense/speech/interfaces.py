"""Host capabilities behind speech capture and playback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence

import numpy as np


@dataclass(frozen=True)
class RecognitionResult:
	"""One recognized fragment; interim fragments may still change."""

	transcript: str
	is_final: bool


ResultHandler = Callable[[Sequence[RecognitionResult]], None]
EndHandler = Callable[[], None]
ErrorHandler = Callable[[str], None]


class RecognitionEngine(Protocol):
	"""Continuous speech-to-text engine bound to a single locale."""

	language: str
	on_result: Optional[ResultHandler]
	on_end: Optional[EndHandler]
	on_error: Optional[ErrorHandler]

	def start(self) -> None:
		"""Begin continuous capture with interim results."""

	def stop(self) -> None:
		"""End capture; the engine reports `on_end` once it has stopped."""


class AudioSink(Protocol):
	"""A freshly created output node that plays decoded samples once."""

	def play(self, samples: np.ndarray, sample_rate: int, channels: int) -> None:
		"""Start playback of float samples in [-1, 1]."""

	def close(self) -> None:
		"""Release the output; playback that is still running is cut off."""


EngineFactory = Callable[[str], RecognitionEngine]
SinkFactory = Callable[[], AudioSink]

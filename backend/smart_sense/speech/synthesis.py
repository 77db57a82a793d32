"""Text-to-speech through Gemini's audio modality."""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from ..gemini_client import GeminiClient
from .interfaces import AudioSink, SinkFactory

logger = logging.getLogger(__name__)

# Gemini TTS returns raw 16-bit little-endian mono PCM at 24 kHz
SAMPLE_RATE = 24_000
CHANNELS = 1

SPEAK_INSTRUCTION = "Say this with a clear, calm voice: {text}"


def decode_pcm16(data: bytes) -> np.ndarray:
	"""Convert little-endian int16 PCM into float32 samples in [-1, 1)."""
	# A dangling odd byte cannot form a sample
	usable = len(data) - (len(data) % 2)
	samples = np.frombuffer(data[:usable], dtype="<i2")
	return samples.astype(np.float32) / 32768.0


class SpeechSynthesisAdapter:
	def __init__(self, client: GeminiClient, sink_factory: Optional[SinkFactory]) -> None:
		self._client = client
		self._sink_factory = sink_factory
		self._sinks: List[AudioSink] = []

	async def speak(self, text: str) -> None:
		"""Generate and play `text`. Failures are logged, never raised."""
		if not text.strip():
			return
		try:
			audio = await self._client.generate_speech(SPEAK_INSTRUCTION.format(text=text))
			if not audio:
				logger.warning("Text-to-speech returned no audio")
				return
			if self._sink_factory is None:
				logger.warning("No audio output available; dropping %d bytes of speech", len(audio))
				return
			samples = decode_pcm16(audio)
			# No queueing: each call plays on its own sink and may overlap others
			sink = self._sink_factory()
			sink.play(samples, SAMPLE_RATE, CHANNELS)
			self._sinks = [s for s in self._sinks if not getattr(s, "finished", False)]
			self._sinks.append(sink)
		except Exception:
			logger.exception("Error with Text-to-Speech")

	def close(self) -> None:
		"""Release every sink that is still playing."""
		sinks, self._sinks = self._sinks, []
		for sink in sinks:
			try:
				sink.close()
			except Exception:
				logger.exception("Failed to close audio output")

"""Speaker output through a per-call sounddevice stream."""

from __future__ import annotations

import threading
from typing import Optional

import numpy as np
import sounddevice as sd


class SoundDeviceSink:
	"""Plays one buffer on its own OutputStream so overlapping calls mix."""

	def __init__(self, device: Optional[int] = None) -> None:
		self._device = device
		self._stream: Optional[sd.OutputStream] = None
		self._lock = threading.Lock()
		self._done = threading.Event()

	@property
	def finished(self) -> bool:
		return self._done.is_set()

	def play(self, samples: np.ndarray, sample_rate: int, channels: int) -> None:
		frames = np.ascontiguousarray(samples, dtype=np.float32).reshape(-1, channels)
		position = 0

		def _callback(outdata, frame_count, time_info, status) -> None:
			nonlocal position
			chunk = frames[position : position + frame_count]
			outdata[: len(chunk)] = chunk
			position += len(chunk)
			if len(chunk) < frame_count:
				outdata[len(chunk) :] = 0
				raise sd.CallbackStop()

		with self._lock:
			self._stream = sd.OutputStream(
				samplerate=sample_rate,
				channels=channels,
				dtype="float32",
				device=self._device,
				callback=_callback,
				finished_callback=self._finished,
			)
			stream = self._stream
		stream.start()

	def close(self) -> None:
		with self._lock:
			stream, self._stream = self._stream, None
		if stream is not None:
			stream.stop()
			stream.close()

	def _finished(self) -> None:
		self._done.set()
		# A stream cannot be closed from its own callback thread
		threading.Thread(target=self.close, name="speech-playback-close", daemon=True).start()

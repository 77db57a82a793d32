"""
Continuous recognition with Google Cloud Speech-to-Text.

Microphone audio is captured with sounddevice as 16 kHz LINEAR16 and streamed
to `streaming_recognize` from a worker thread. The stream ends on `stop()`,
on the service's own stream limit, or on error; each of these reports
`on_end` once.

Every `start()` opens a new session with its own audio queue and stop flag.
A session that is still flushing when the next one starts keeps running to
its end, but it no longer reports anything.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Iterable, Iterator, Optional

import sounddevice as sd
from google.api_core.exceptions import GoogleAPIError
from google.cloud import speech_v1p1beta1 as speech

from .interfaces import EndHandler, ErrorHandler, RecognitionResult, ResultHandler

logger = logging.getLogger(__name__)

CAPTURE_RATE = 16_000
# 100 ms of audio per streamed request
BLOCK_FRAMES = CAPTURE_RATE // 10


class _Session:
	def __init__(self) -> None:
		self.audio: "queue.Queue[Optional[bytes]]" = queue.Queue()
		self.stopped = threading.Event()

	def stop(self) -> None:
		self.stopped.set()
		self.audio.put(None)


class CloudSpeechEngine:
	def __init__(self, language: str, *, client: Optional[speech.SpeechClient] = None, sample_rate: int = CAPTURE_RATE) -> None:
		self.language = language
		self.sample_rate = sample_rate
		self.on_result: Optional[ResultHandler] = None
		self.on_end: Optional[EndHandler] = None
		self.on_error: Optional[ErrorHandler] = None
		self._client = client
		self._session: Optional[_Session] = None
		self._thread: Optional[threading.Thread] = None

	def start(self) -> None:
		session = self._session
		if session is not None and not session.stopped.is_set() and self._thread is not None and self._thread.is_alive():
			return
		self._session = session = _Session()
		self._thread = threading.Thread(target=self._run, args=(session,), name=f"speech-{self.language}", daemon=True)
		self._thread.start()

	def stop(self) -> None:
		if self._session is not None:
			self._session.stop()

	def streaming_config(self) -> speech.StreamingRecognitionConfig:
		config = speech.RecognitionConfig(
			encoding=speech.RecognitionConfig.AudioEncoding.LINEAR16,
			sample_rate_hertz=self.sample_rate,
			language_code=self.language,
			enable_automatic_punctuation=True,
		)
		return speech.StreamingRecognitionConfig(config=config, interim_results=True, single_utterance=False)

	def handle_responses(self, responses: Iterable[speech.StreamingRecognizeResponse], session: Optional[_Session] = None) -> None:
		for response in responses:
			results = [
				RecognitionResult(transcript=r.alternatives[0].transcript, is_final=r.is_final)
				for r in response.results
				if r.alternatives
			]
			if results and self.on_result is not None and self._reports(session):
				self.on_result(results)

	def _reports(self, session: Optional[_Session]) -> bool:
		return session is None or session is self._session

	def _requests(self, session: _Session) -> Iterator[speech.StreamingRecognizeRequest]:
		# Audio captured before stop() is still sent; the None marker ends the stream
		while True:
			chunk = session.audio.get()
			if chunk is None:
				return
			yield speech.StreamingRecognizeRequest(audio_content=chunk)

	def _run(self, session: _Session) -> None:
		def _on_audio(indata, frames, time_info, status) -> None:
			if status:
				logger.debug("Microphone status: %s", status)
			session.audio.put(bytes(indata))

		try:
			client = self._client or speech.SpeechClient()
			with sd.RawInputStream(
				samplerate=self.sample_rate,
				blocksize=BLOCK_FRAMES,
				dtype="int16",
				channels=1,
				callback=_on_audio,
			):
				responses = client.streaming_recognize(config=self.streaming_config(), requests=self._requests(session))
				self.handle_responses(responses, session)
		except GoogleAPIError as err:
			self._emit_error(session, f"service error: {err}")
		except sd.PortAudioError as err:
			self._emit_error(session, f"audio-capture: {err}")
		except Exception as err:
			logger.exception("Recognition stream crashed")
			self._emit_error(session, str(err))
		finally:
			if self.on_end is not None and self._reports(session):
				self.on_end()

	def _emit_error(self, session: _Session, reason: str) -> None:
		if self.on_error is not None and self._reports(session):
			self.on_error(reason)

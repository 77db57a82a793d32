"""
Speech capture adapter.

Wraps a continuous recognition engine and keeps the transcript of the current
listening session. States move idle -> listening -> idle; a host without a
usable engine is `unsupported` for the lifetime of the adapter.

Engines report from their own worker thread, so every state change goes
through one lock. Each engine is bound to a locale; changing the language
while idle rebuilds the engine at once, while listening the running session
keeps its locale and the rebuild happens on the next `start_listening()`.
Every session runs on an engine that has never been started, so a
restart never shares an engine with the session before it. Events from an
engine that has been replaced are dropped.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional, Sequence

from ..errors import SpeechUnavailableError
from ..models import DEFAULT_LOCALE
from .interfaces import EngineFactory, RecognitionEngine, RecognitionResult

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "Speech recognition is not supported on this platform."


class ListeningState(str, Enum):
	IDLE = "idle"
	LISTENING = "listening"
	UNSUPPORTED = "unsupported"


class SpeechCaptureAdapter:
	def __init__(self, engine_factory: Optional[EngineFactory], *, language: str = DEFAULT_LOCALE) -> None:
		self._factory = engine_factory
		self._language = language
		self._lock = threading.RLock()
		self._state = ListeningState.IDLE
		self._transcript = ""
		self._error: Optional[str] = None
		self._engine: Optional[RecognitionEngine] = None
		# An engine serves one session; a used engine is replaced on the next start
		self._engine_used = False
		if engine_factory is None:
			self._mark_unsupported(None)
		else:
			self._engine = self._build_engine(language)

	@property
	def state(self) -> ListeningState:
		return self._state

	@property
	def is_listening(self) -> bool:
		return self._state is ListeningState.LISTENING

	@property
	def supported(self) -> bool:
		return self._state is not ListeningState.UNSUPPORTED

	@property
	def transcript(self) -> str:
		return self._transcript

	@property
	def error(self) -> Optional[str]:
		return self._error

	@property
	def language(self) -> str:
		return self._language

	def start_listening(self) -> bool:
		"""Start a fresh session; returns False when not idle."""
		with self._lock:
			if self._state is not ListeningState.IDLE:
				return False
			if self._engine is None or self._engine_used:
				self._engine = self._build_engine(self._language)
				if self._engine is None:
					return False
			self._engine_used = True
			self._transcript = ""
			self._error = None
			self._state = ListeningState.LISTENING
			engine = self._engine
		try:
			engine.start()
		except Exception as err:
			logger.exception("Recognition engine failed to start")
			self._handle_error(engine, str(err))
			return False
		return True

	def stop_listening(self) -> bool:
		"""Stop the running session; returns False when not listening."""
		with self._lock:
			if self._state is not ListeningState.LISTENING:
				return False
			self._state = ListeningState.IDLE
			engine = self._engine
		if engine is not None:
			engine.stop()
		return True

	def set_language(self, language: str) -> None:
		with self._lock:
			if language == self._language:
				return
			self._language = language
			if self._state is ListeningState.UNSUPPORTED:
				return
			if self._state is ListeningState.LISTENING:
				# The running engine is already used; the next start rebuilds it
				return
			self._engine = self._build_engine(language)

	def close(self) -> None:
		self.stop_listening()

	def _build_engine(self, language: str) -> Optional[RecognitionEngine]:
		try:
			engine = self._factory(language)
		except SpeechUnavailableError as err:
			self._mark_unsupported(err)
			return None
		engine.on_result = lambda results: self._handle_result(engine, results)
		engine.on_end = lambda: self._handle_end(engine)
		engine.on_error = lambda reason: self._handle_error(engine, reason)
		self._engine_used = False
		return engine

	def _mark_unsupported(self, err: Optional[Exception]) -> None:
		if err is not None:
			logger.warning("Speech recognition unavailable: %s", err)
		self._engine = None
		self._state = ListeningState.UNSUPPORTED
		self._error = UNSUPPORTED_MESSAGE

	def _handle_result(self, engine: RecognitionEngine, results: Sequence[RecognitionResult]) -> None:
		final = "".join(r.transcript for r in results if r.is_final).strip()
		if not final:
			return
		with self._lock:
			if engine is not self._engine:
				return
			self._transcript = f"{self._transcript} {final}" if self._transcript else final

	def _handle_end(self, engine: RecognitionEngine) -> None:
		with self._lock:
			if engine is self._engine and self._state is ListeningState.LISTENING:
				self._state = ListeningState.IDLE

	def _handle_error(self, engine: RecognitionEngine, reason: str) -> None:
		with self._lock:
			if engine is not self._engine:
				return
			self._error = f"Speech recognition error: {reason}"
			if self._state is ListeningState.LISTENING:
				self._state = ListeningState.IDLE

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from smart_sense.errors import GenerationError
from smart_sense.main import create_app
from smart_sense.settings import Settings
from smart_sense.speech.interfaces import RecognitionResult
from smart_sense.state import AppState


class StubGeminiClient:
	"""Records every call; answers from a queue of canned responses."""

	def __init__(self, responses: Optional[List[str]] = None, *, fail: bool = False, audio: bytes = b"") -> None:
		self.api_key = "test-key"
		self.responses = list(responses or [])
		self.fail = fail
		self.audio = audio
		self.calls: List[Dict[str, Any]] = []
		self.chat_calls: List[Dict[str, Any]] = []
		self.speech_calls: List[str] = []
		self.closed = False

	def _next(self, default: str) -> str:
		if self.fail:
			raise GenerationError("gemini unavailable")
		return self.responses.pop(0) if self.responses else default

	async def generate(self, prompt: str, *, model: Optional[str] = None, response_schema: Optional[Dict[str, Any]] = None) -> str:
		self.calls.append({"prompt": prompt, "model": model, "schema": response_schema})
		return self._next("generated text")

	async def chat(self, contents: List[Dict[str, Any]], *, system_instruction: Optional[str] = None, model: Optional[str] = None) -> str:
		self.chat_calls.append({"contents": list(contents), "system_instruction": system_instruction, "model": model})
		return self._next("assistant reply")

	async def generate_speech(self, text: str, *, voice: Optional[str] = None, model: Optional[str] = None) -> bytes:
		self.speech_calls.append(text)
		if self.fail:
			raise GenerationError("tts unavailable")
		return self.audio

	async def aclose(self) -> None:
		self.closed = True


class FakeEngine:
	def __init__(self, language: str) -> None:
		self.language = language
		self.on_result = None
		self.on_end = None
		self.on_error = None
		self.started = 0
		self.stopped = 0

	def start(self) -> None:
		self.started += 1

	def stop(self) -> None:
		self.stopped += 1
		if self.on_end is not None:
			self.on_end()

	def emit(self, *fragments: str, final: bool = True) -> None:
		self.on_result([RecognitionResult(transcript=f, is_final=final) for f in fragments])

	def end(self) -> None:
		self.on_end()

	def fail(self, reason: str) -> None:
		self.on_error(reason)


class FakeEngineFactory:
	def __init__(self) -> None:
		self.engines: List[FakeEngine] = []

	def __call__(self, language: str) -> FakeEngine:
		engine = FakeEngine(language)
		self.engines.append(engine)
		return engine

	@property
	def latest(self) -> FakeEngine:
		return self.engines[-1]


class RecordingSink:
	def __init__(self, log: List[Dict[str, Any]]) -> None:
		self._log = log
		self.finished = False
		self.closed = False

	def play(self, samples, sample_rate: int, channels: int) -> None:
		self._log.append({"samples": samples, "sample_rate": sample_rate, "channels": channels})
		self.finished = True

	def close(self) -> None:
		self.closed = True


class RecordingSinkFactory:
	def __init__(self) -> None:
		self.played: List[Dict[str, Any]] = []
		self.created = 0
		self.sinks: List[RecordingSink] = []

	def __call__(self) -> RecordingSink:
		self.created += 1
		sink = RecordingSink(self.played)
		self.sinks.append(sink)
		return sink


@pytest.fixture
def config(tmp_path: Path) -> Settings:
	return Settings(gemini_api_key="test-key", export_dir=str(tmp_path / "exports"))


@pytest.fixture
def stub_client() -> StubGeminiClient:
	return StubGeminiClient()


@pytest.fixture
def engines() -> FakeEngineFactory:
	return FakeEngineFactory()


@pytest.fixture
def sinks() -> RecordingSinkFactory:
	return RecordingSinkFactory()


@pytest.fixture
def app_state(config: Settings, stub_client: StubGeminiClient, engines: FakeEngineFactory, sinks: RecordingSinkFactory) -> AppState:
	return AppState.create(config, client=stub_client, engine_factory=engines, sink_factory=sinks)


@pytest.fixture
def api(app_state: AppState):
	with TestClient(create_app(lambda: app_state)) as client:
		yield client

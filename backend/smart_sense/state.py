"""
Application state.

One `AppState` is created when the application starts and closed when it
stops. It owns the Gemini client and everything built on it, plus the latest
result of every panel; nothing here survives a restart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from fastapi import Request

from .chat import ConversationalSessionAdapter
from .dispatcher import GenerationDispatcher
from .gemini_client import GeminiClient
from .models import GenerationResult, StructuredResult
from .settings import Settings, settings as default_settings
from .speech.backends import cloud_engine_factory, sounddevice_sink_factory
from .speech.capture import SpeechCaptureAdapter
from .speech.interfaces import EngineFactory, SinkFactory
from .speech.synthesis import SpeechSynthesisAdapter

WRITER_PANEL = "writer"
SUMMARY_PANEL = "summary"
ROADMAP_PANEL = "roadmap"
MEDICAL_PANEL = "medical-info"
TRANSLATE_PANEL = "translate"

PANELS = (WRITER_PANEL, SUMMARY_PANEL, ROADMAP_PANEL, MEDICAL_PANEL, TRANSLATE_PANEL)


@dataclass
class PanelState:
	"""Latest result shown by one panel."""

	name: str
	result: Optional[GenerationResult] = None
	# Tool or topic the result was generated for; names the export file
	subject: Optional[str] = None
	emoji_spawned: bool = False

	def publish(self, result: GenerationResult, subject: Optional[str] = None) -> None:
		self.result = result
		self.subject = subject
		self.emoji_spawned = False

	def spawn_emoji(self) -> Optional[str]:
		"""Hand out the result's emoji the first time only."""
		if self.emoji_spawned or not isinstance(self.result, StructuredResult):
			return None
		self.emoji_spawned = True
		return self.result.emoji


class AppState:
	def __init__(
		self,
		*,
		config: Settings,
		client: GeminiClient,
		engine_factory: Optional[EngineFactory] = None,
		sink_factory: Optional[SinkFactory] = None,
	) -> None:
		self.config = config
		self.client = client
		self.dispatcher = GenerationDispatcher(client, config)
		self.chat = ConversationalSessionAdapter(client, model=config.gemini_model)
		self.capture = SpeechCaptureAdapter(engine_factory)
		self.synthesis = SpeechSynthesisAdapter(client, sink_factory)
		self.panels: Dict[str, PanelState] = {name: PanelState(name) for name in PANELS}

	@classmethod
	def create(
		cls,
		config: Optional[Settings] = None,
		*,
		client: Optional[GeminiClient] = None,
		engine_factory: Optional[EngineFactory] = cloud_engine_factory,
		sink_factory: Optional[SinkFactory] = sounddevice_sink_factory,
	) -> "AppState":
		config = config or default_settings
		# Raises MissingCredentialError without an API key
		client = client or GeminiClient(config=config)
		return cls(config=config, client=client, engine_factory=engine_factory, sink_factory=sink_factory)

	def panel(self, name: str) -> PanelState:
		return self.panels[name]

	async def aclose(self) -> None:
		self.capture.close()
		self.synthesis.close()
		await self.client.aclose()


def get_state(request: Request) -> AppState:
	return request.app.state.smart_sense

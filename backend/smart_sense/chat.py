"""
Conversational assistant.

Gemini's REST API is stateless, so `ChatSession` is the handle that carries
the conversation: every turn resends the successful prior turns together with
the system instruction. The adapter creates exactly one session on first use
and keeps it for the lifetime of the application.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .gemini_client import GeminiClient
from .models import ChatMessage, PlainResult

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = "You are a helpful assistant for the Smart Sense AI app. Be concise and friendly."
GREETING = "Hello! How can I help you today?"
CHAT_ERROR_TEXT = "Sorry, I encountered an error. Please try again."


class ChatSession:
	def __init__(self, client: GeminiClient, *, system_instruction: str = SYSTEM_INSTRUCTION, model: Optional[str] = None) -> None:
		self._client = client
		self.system_instruction = system_instruction
		self.model = model
		self._history: List[Dict[str, Any]] = []

	@property
	def history(self) -> List[Dict[str, Any]]:
		return list(self._history)

	async def send(self, text: str) -> str:
		user_turn = {"role": "user", "parts": [{"text": text}]}
		reply = await self._client.chat(
			self._history + [user_turn],
			system_instruction=self.system_instruction,
			model=self.model,
		)
		# Only completed exchanges become context for later turns
		self._history.append(user_turn)
		self._history.append({"role": "model", "parts": [{"text": reply}]})
		return reply


class ConversationalSessionAdapter:
	def __init__(self, client: GeminiClient, *, model: Optional[str] = None) -> None:
		self._client = client
		self._model = model
		self._session: Optional[ChatSession] = None
		self._messages: List[ChatMessage] = []

	@property
	def is_open(self) -> bool:
		return self._session is not None

	@property
	def messages(self) -> List[ChatMessage]:
		return list(self._messages)

	def open(self) -> ChatSession:
		if self._session is None:
			self._session = ChatSession(self._client, model=self._model)
			self._messages.append(ChatMessage(role="model", text=GREETING))
		return self._session

	async def send_message(self, text: str) -> PlainResult:
		session = self.open()
		self._messages.append(ChatMessage(role="user", text=text))
		try:
			reply = await session.send(text)
		except Exception as err:
			logger.error("Chatbot error: %s", err, exc_info=err)
			reply = CHAT_ERROR_TEXT
		self._messages.append(ChatMessage(role="model", text=reply))
		return PlainResult(text=reply)

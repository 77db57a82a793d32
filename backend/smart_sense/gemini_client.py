from __future__ import annotations
import base64
import httpx
from typing import Any, Dict, List, Optional
from .errors import GenerationError, MalformedResponseError, MissingCredentialError
from .settings import Settings, settings as default_settings

class GeminiClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		model: Optional[str] = None,
		config: Optional[Settings] = None,
		http_client: Optional[httpx.AsyncClient] = None,
	) -> None:
		self.config = config or default_settings
		self.api_key = api_key or self.config.gemini_api_key
		if not self.api_key:
			raise MissingCredentialError("GEMINI_API_KEY is not configured")
		self.model = model or self.config.gemini_model
		self.provider = self.config.gemini_provider
		self._auth_in_query = self.provider != "vertex"
		self._client = http_client or httpx.AsyncClient(timeout=self.config.timeout_seconds)

	def endpoint(self, model: str) -> str:
		if self.provider == "vertex":
			region = self.config.vertex_region
			project = self.config.vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint (API key via header)
			return (
				f"https://{region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{region}/publishers/google/models/{model}:generateContent"
			)
		# Google AI Studio (Generative Language API)
		return f"https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

	async def generate(
		self,
		prompt: str,
		*,
		model: Optional[str] = None,
		response_schema: Optional[Dict[str, Any]] = None,
	) -> str:
		payload: Dict[str, Any] = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
		if response_schema is not None:
			payload["generationConfig"] = {
				"responseMimeType": "application/json",
				"responseSchema": response_schema,
			}
		data = await self._post_payload(model or self.model, payload)
		return self._extract_text(data)

	async def chat(
		self,
		contents: List[Dict[str, Any]],
		*,
		system_instruction: Optional[str] = None,
		model: Optional[str] = None,
	) -> str:
		payload: Dict[str, Any] = {"contents": contents}
		if system_instruction:
			payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
		data = await self._post_payload(model or self.model, payload)
		return self._extract_text(data)

	async def generate_speech(self, text: str, *, voice: Optional[str] = None, model: Optional[str] = None) -> bytes:
		payload: Dict[str, Any] = {
			"contents": [{"parts": [{"text": text}]}],
			"generationConfig": {
				"responseModalities": ["AUDIO"],
				"speechConfig": {
					"voiceConfig": {"prebuiltVoiceConfig": {"voiceName": voice or self.config.gemini_tts_voice}},
				},
			},
		}
		data = await self._post_payload(model or self.config.gemini_model_tts, payload)
		try:
			encoded = data["candidates"][0]["content"]["parts"][0]["inlineData"]["data"]
		except (KeyError, IndexError, TypeError):
			return b""
		return base64.b64decode(encoded) if encoded else b""

	async def _post_payload(self, model: str, payload: Dict[str, Any]) -> Dict[str, Any]:
		params: Dict[str, Any] = {}
		headers: Dict[str, str] = {}
		if self._auth_in_query:
			params["key"] = self.api_key
		else:
			headers["x-goog-api-key"] = self.api_key
		try:
			r = await self._client.post(self.endpoint(model), params=params, headers=headers, json=payload)
			r.raise_for_status()
		except httpx.HTTPStatusError as http_err:
			raise GenerationError(f"Gemini returned HTTP {http_err.response.status_code}") from http_err
		except httpx.RequestError as net_err:
			raise GenerationError(f"Gemini request failed: {net_err}") from net_err
		try:
			return r.json()
		except ValueError as err:
			raise MalformedResponseError(f"Unexpected Gemini response: {r.text}") from err

	@staticmethod
	def _extract_text(data: Dict[str, Any]) -> str:
		try:
			parts = data["candidates"][0]["content"]["parts"]
		except (KeyError, IndexError, TypeError) as err:
			raise MalformedResponseError(f"Unexpected Gemini response: {data}") from err
		return "".join(p.get("text", "") for p in parts if isinstance(p, dict))

	async def aclose(self) -> None:
		await self._client.aclose()

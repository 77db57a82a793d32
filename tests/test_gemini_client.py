import asyncio
import base64
import json

import httpx
import pytest

from smart_sense.errors import GenerationError, MalformedResponseError, MissingCredentialError
from smart_sense.gemini_client import GeminiClient
from smart_sense.settings import Settings


def _text_response(text: str) -> dict:
	return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def _client(config: Settings, handler, captured: list) -> GeminiClient:
	def _record(request: httpx.Request) -> httpx.Response:
		captured.append(request)
		return handler(request)

	http = httpx.AsyncClient(transport=httpx.MockTransport(_record))
	return GeminiClient(config=config, http_client=http)


def test_missing_key_is_fatal() -> None:
	with pytest.raises(MissingCredentialError):
		GeminiClient(config=Settings(gemini_api_key=None))


def test_generate_posts_prompt_and_schema(config) -> None:
	captured: list = []
	client = _client(config, lambda r: httpx.Response(200, json=_text_response('{"ok": true}')), captured)
	schema = {"type": "OBJECT", "properties": {}}

	text = asyncio.run(client.generate("Say hi", response_schema=schema))

	assert text == '{"ok": true}'
	request = captured[0]
	assert request.url.params["key"] == "test-key"
	assert request.url.path.endswith(f"/models/{config.gemini_model}:generateContent")
	body = json.loads(request.content)
	assert body["contents"][0]["parts"][0]["text"] == "Say hi"
	assert body["generationConfig"] == {"responseMimeType": "application/json", "responseSchema": schema}


def test_vertex_provider_sends_key_in_header() -> None:
	config = Settings(gemini_api_key="vk", gemini_provider="vertex", vertex_project="proj")
	captured: list = []
	client = _client(config, lambda r: httpx.Response(200, json=_text_response("ok")), captured)

	asyncio.run(client.generate("x"))

	assert captured[0].headers["x-goog-api-key"] == "vk"
	assert "key" not in captured[0].url.params
	assert "/projects/proj/" in captured[0].url.path


def test_chat_sends_history_and_system_instruction(config) -> None:
	captured: list = []
	client = _client(config, lambda r: httpx.Response(200, json=_text_response("hey")), captured)
	contents = [{"role": "user", "parts": [{"text": "hello"}]}]

	reply = asyncio.run(client.chat(contents, system_instruction="Be brief."))

	body = json.loads(captured[0].content)
	assert reply == "hey"
	assert body["contents"] == contents
	assert body["systemInstruction"] == {"parts": [{"text": "Be brief."}]}


def test_http_error_becomes_generation_error(config) -> None:
	client = _client(config, lambda r: httpx.Response(503, json={"error": "busy"}), [])
	with pytest.raises(GenerationError):
		asyncio.run(client.generate("x"))


def test_response_without_candidates_is_malformed(config) -> None:
	client = _client(config, lambda r: httpx.Response(200, json={"promptFeedback": {}}), [])
	with pytest.raises(MalformedResponseError):
		asyncio.run(client.generate("x"))


def test_generate_speech_decodes_inline_audio(config) -> None:
	pcm = b"\x00\x01\x02\x03"
	payload = {"candidates": [{"content": {"parts": [{"inlineData": {"mimeType": "audio/L16", "data": base64.b64encode(pcm).decode()}}]}}]}
	captured: list = []
	client = _client(config, lambda r: httpx.Response(200, json=payload), captured)

	audio = asyncio.run(client.generate_speech("Say hi"))

	body = json.loads(captured[0].content)
	assert audio == pcm
	assert body["generationConfig"]["responseModalities"] == ["AUDIO"]
	assert body["generationConfig"]["speechConfig"]["voiceConfig"]["prebuiltVoiceConfig"]["voiceName"] == "Kore"
	assert captured[0].url.path.endswith(f"/models/{config.gemini_model_tts}:generateContent")


def test_generate_speech_without_audio_is_empty(config) -> None:
	client = _client(config, lambda r: httpx.Response(200, json=_text_response("no audio")), [])
	assert asyncio.run(client.generate_speech("x")) == b""

from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..models import LANGUAGE_LOCALES, Language, TranslateRequest, language_for_locale
from ..state import TRANSLATE_PANEL, AppState, get_state
from .panels import GenerateResponse, generate_for_panel

router = APIRouter(prefix="/translate", tags=["translate"])


class TranscriptTranslateRequest(BaseModel):
	# Defaults to the language the transcript was captured in
	source: Optional[Language] = None
	target: Language = Language.HINDI


@router.get("/languages")
def languages() -> Dict[str, str]:
	return {language.value: locale for language, locale in LANGUAGE_LOCALES.items()}


@router.post("", response_model=GenerateResponse)
async def translate(req: TranslateRequest, state: AppState = Depends(get_state)):
	return await generate_for_panel(state, TRANSLATE_PANEL, req)


@router.post("/transcript", response_model=GenerateResponse)
async def translate_transcript(req: TranscriptTranslateRequest, state: AppState = Depends(get_state)):
	"""Translate what the microphone captured once listening has finished."""
	if state.capture.is_listening:
		raise HTTPException(status_code=409, detail="still listening")
	text = state.capture.transcript.strip()
	if not text:
		raise HTTPException(status_code=400, detail="no transcript captured")
	source = req.source or language_for_locale(state.capture.language) or Language.ENGLISH
	return await generate_for_panel(state, TRANSLATE_PANEL, TranslateRequest(text=text, source=source, target=req.target))

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from pydantic import BaseModel

from ..models import InputText, Language
from ..state import PANELS, AppState, get_state

router = APIRouter(prefix="/speech", tags=["speech"])


class ListenRequest(BaseModel):
	language: Optional[Language] = None


class LanguageRequest(BaseModel):
	language: Language


class SpeakRequest(BaseModel):
	text: InputText


class ListeningStatus(BaseModel):
	state: str
	listening: bool
	transcript: str
	error: Optional[str] = None
	language: str


def _status(state: AppState) -> ListeningStatus:
	capture = state.capture
	return ListeningStatus(
		state=capture.state.value,
		listening=capture.is_listening,
		transcript=capture.transcript,
		error=capture.error,
		language=capture.language,
	)


@router.get("/listen", response_model=ListeningStatus)
def listening_status(state: AppState = Depends(get_state)):
	return _status(state)


@router.post("/listen/start", response_model=ListeningStatus)
def start_listening(req: Optional[ListenRequest] = None, state: AppState = Depends(get_state)):
	if req is not None and req.language is not None:
		state.capture.set_language(req.language.locale)
	state.capture.start_listening()
	return _status(state)


@router.post("/listen/stop", response_model=ListeningStatus)
def stop_listening(state: AppState = Depends(get_state)):
	state.capture.stop_listening()
	return _status(state)


@router.put("/language", response_model=ListeningStatus)
def set_language(req: LanguageRequest, state: AppState = Depends(get_state)):
	state.capture.set_language(req.language.locale)
	return _status(state)


@router.post("/speak", status_code=202)
def speak(req: SpeakRequest, background: BackgroundTasks, state: AppState = Depends(get_state)):
	# Playback runs after the response is sent; overlapping requests overlap audibly
	background.add_task(state.synthesis.speak, req.text)
	return {"queued": True}


@router.post("/speak/{panel}", status_code=202)
def speak_panel(panel: str, background: BackgroundTasks, state: AppState = Depends(get_state)):
	if panel not in PANELS:
		raise HTTPException(status_code=404, detail=f"unknown panel: {panel}")
	result = state.panel(panel).result
	if result is None or not result.text:
		raise HTTPException(status_code=404, detail="nothing to speak yet")
	background.add_task(state.synthesis.speak, result.text)
	return {"queued": True}

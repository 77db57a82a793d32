from fastapi import APIRouter, Depends

from ..state import AppState, get_state

router = APIRouter(tags=["health"])


@router.get("/info")
def info(state: AppState = Depends(get_state)):
	return {
		"status": "ok",
		"gemini_configured": bool(state.client.api_key),
		"speech_recognition_supported": state.capture.supported,
	}

from fastapi import APIRouter, Depends

from ..models import SummaryRequest
from ..state import SUMMARY_PANEL, AppState, get_state
from .panels import GenerateResponse, generate_for_panel

router = APIRouter(prefix="/productivity", tags=["productivity"])


@router.post("/summarize", response_model=GenerateResponse)
async def summarize(req: SummaryRequest, state: AppState = Depends(get_state)):
	return await generate_for_panel(state, SUMMARY_PANEL, req)

from fastapi import APIRouter, Depends

from ..models import ApologyRequest, EmailRequest, ExcuseRequest, LetterRequest
from ..state import WRITER_PANEL, AppState, get_state
from .panels import ExportResponse, GenerateResponse, PanelResponse, export_panel, generate_for_panel, panel_snapshot

router = APIRouter(prefix="/writer", tags=["writer"])


@router.post("/excuse", response_model=GenerateResponse)
async def excuse(req: ExcuseRequest, state: AppState = Depends(get_state)):
	return await generate_for_panel(state, WRITER_PANEL, req, subject="excuse")


@router.post("/apology", response_model=GenerateResponse)
async def apology(req: ApologyRequest, state: AppState = Depends(get_state)):
	return await generate_for_panel(state, WRITER_PANEL, req, subject="apology")


@router.post("/email", response_model=GenerateResponse)
async def email(req: EmailRequest, state: AppState = Depends(get_state)):
	return await generate_for_panel(state, WRITER_PANEL, req, subject="email")


@router.post("/letter", response_model=GenerateResponse)
async def letter(req: LetterRequest, state: AppState = Depends(get_state)):
	return await generate_for_panel(state, WRITER_PANEL, req, subject="letter")


@router.get("/result", response_model=PanelResponse)
async def result(state: AppState = Depends(get_state)):
	# Re-reading a result never re-spawns its emoji
	return panel_snapshot(state, WRITER_PANEL)


@router.post("/export", response_model=ExportResponse)
def export(state: AppState = Depends(get_state)):
	return export_panel(state, WRITER_PANEL)

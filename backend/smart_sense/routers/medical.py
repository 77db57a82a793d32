from fastapi import APIRouter, Depends

from ..models import MedicalInfoRequest
from ..state import MEDICAL_PANEL, AppState, get_state
from .panels import ExportResponse, GenerateResponse, PanelResponse, export_panel, generate_for_panel, panel_snapshot

router = APIRouter(prefix="/medical", tags=["medical"])


@router.post("/info", response_model=GenerateResponse)
async def medical_info(req: MedicalInfoRequest, state: AppState = Depends(get_state)):
	return await generate_for_panel(state, MEDICAL_PANEL, req, subject=req.condition)


@router.get("/info", response_model=PanelResponse)
async def current_info(state: AppState = Depends(get_state)):
	return panel_snapshot(state, MEDICAL_PANEL)


@router.post("/export", response_model=ExportResponse)
def export(state: AppState = Depends(get_state)):
	return export_panel(state, MEDICAL_PANEL)

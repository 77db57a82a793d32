from fastapi import APIRouter, Depends

from ..models import RoadmapRequest
from ..state import ROADMAP_PANEL, AppState, get_state
from .panels import ExportResponse, GenerateResponse, PanelResponse, export_panel, generate_for_panel, panel_snapshot

router = APIRouter(prefix="/learning", tags=["learning"])


@router.post("/roadmap", response_model=GenerateResponse)
async def roadmap(req: RoadmapRequest, state: AppState = Depends(get_state)):
	return await generate_for_panel(state, ROADMAP_PANEL, req, subject=req.topic)


@router.get("/roadmap", response_model=PanelResponse)
async def current_roadmap(state: AppState = Depends(get_state)):
	return panel_snapshot(state, ROADMAP_PANEL)


@router.post("/export", response_model=ExportResponse)
def export(state: AppState = Depends(get_state)):
	return export_panel(state, ROADMAP_PANEL)

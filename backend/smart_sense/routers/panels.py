"""Response models and helpers shared by the generation panels."""

from __future__ import annotations
from typing import Optional

from fastapi import HTTPException
from pydantic import BaseModel

from ..export import export_filename, export_text
from ..models import GenerationRequest, GenerationResult
from ..state import AppState


class GenerateResponse(BaseModel):
	result: GenerationResult
	# Emoji to animate for this result; only set on the request that produced it
	floating_emoji: Optional[str] = None


class PanelResponse(BaseModel):
	panel: str
	subject: Optional[str] = None
	result: Optional[GenerationResult] = None


class ExportResponse(BaseModel):
	filename: str
	path: str


async def generate_for_panel(state: AppState, panel_name: str, req: GenerationRequest, subject: Optional[str] = None) -> GenerateResponse:
	result = await state.dispatcher.generate(req)
	panel = state.panel(panel_name)
	panel.publish(result, subject=subject)
	return GenerateResponse(result=result, floating_emoji=panel.spawn_emoji())


def panel_snapshot(state: AppState, panel_name: str) -> PanelResponse:
	panel = state.panel(panel_name)
	return PanelResponse(panel=panel.name, subject=panel.subject, result=panel.result)


def export_panel(state: AppState, panel_name: str) -> ExportResponse:
	panel = state.panel(panel_name)
	if panel.result is None or not panel.result.text:
		raise HTTPException(status_code=404, detail="nothing to export yet")
	filename = export_filename(panel_name, panel.subject)
	path = export_text(panel.result.text, filename, state.config.export_dir)
	return ExportResponse(filename=filename, path=str(path))

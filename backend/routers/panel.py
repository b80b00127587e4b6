"""Diff panel API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.panel import PanelSnapshot, SelectRequest
from services.artifact_store import get_artifact_store
from services.config_manager import ConfigManager
from services.diff_panel import get_panel_registry

router = APIRouter()

# Which artifact each panel is currently looking at
panel_artifacts: dict[str, str] = {}


@router.post("/{panel_id}/select", response_model=PanelSnapshot)
async def select_diff(panel_id: str, request: SelectRequest) -> PanelSnapshot:
    """Open the panel on the comparison attached to a message"""
    store = get_artifact_store()
    descriptor = store.get_diff_info(request.artifact_id, request.diff_id)
    if descriptor is None:
        raise HTTPException(status_code=404, detail=f"No diff info for message: {request.diff_id}")

    panel = get_panel_registry().get_or_create(panel_id)
    panel.apply_settings(ConfigManager.get_instance().get_diff_settings())
    panel.select(descriptor)
    panel_artifacts[panel_id] = request.artifact_id
    return panel.refresh(store.get_artifact(request.artifact_id))


@router.get("/{panel_id}", response_model=PanelSnapshot)
async def get_panel(panel_id: str) -> PanelSnapshot:
    """Recompute against the latest history and return what to display"""
    panel = get_panel_registry().get(panel_id)
    if panel is None or panel.descriptor is None:
        return PanelSnapshot()

    artifact_id = panel_artifacts.get(panel_id)
    history = get_artifact_store().get_artifact(artifact_id) if artifact_id else None
    return panel.refresh(history)


@router.delete("/{panel_id}", response_model=PanelSnapshot)
async def close_panel(panel_id: str) -> PanelSnapshot:
    """Close the panel and drop its diff"""
    panel = get_panel_registry().remove(panel_id)
    if panel is not None:
        panel.close()
    panel_artifacts.pop(panel_id, None)
    return PanelSnapshot()

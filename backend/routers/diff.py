"""Stateless diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.panel import DiffRequest, PanelSnapshot
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.diff_panel import render_comparison
from services.exceptions import DiffComputationFailed
from services.version_resolver import VersionResolver

router = APIRouter()
diff_generator = DiffGenerator()


@router.post("/compute", response_model=PanelSnapshot)
async def compute_diff(request: DiffRequest) -> PanelSnapshot:
    """Resolve a comparison against the given history and diff it"""
    settings = ConfigManager.get_instance().get_diff_settings()
    resolver = VersionResolver(default_file_name=settings["defaultFileName"])

    try:
        return render_comparison(request.artifact, request.descriptor, resolver, diff_generator, settings)
    except DiffComputationFailed as e:
        raise HTTPException(status_code=500, detail=str(e))

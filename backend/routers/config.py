"""Configuration API endpoints"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from services.config_manager import ConfigManager

router = APIRouter()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    model_config = ConfigDict(populate_by_name=True)

    log_level: str | None = Field(default=None, alias="logLevel")
    diff: dict | None = None
    server: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    model_config = ConfigDict(populate_by_name=True)

    log_level: str = Field(alias="logLevel")
    diff: dict
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config_manager = ConfigManager.get_instance()
    config = config_manager.get_config()

    return ConfigResponse(
        log_level=config.get("logLevel", "INFO"),
        diff=config_manager.get_diff_settings(),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.log_level:
        level = request.log_level.upper()
        if level not in _LOG_LEVELS:
            raise HTTPException(status_code=400, detail=f"Unknown log level: {request.log_level}")
        current_config["logLevel"] = level
        logging.getLogger().setLevel(level)
    if request.diff:
        current_config["diff"] = {**current_config.get("diff", {}), **request.diff}
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}

"""Shared fixtures for tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from factories import code_version, text_version
from models.artifact import Artifact
from routers import panel as panel_router
from services.artifact_store import get_artifact_store
from services.config_manager import ConfigManager
from services.diff_panel import get_panel_registry


@pytest.fixture(autouse=True)
def isolated_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config at a temp dir and start every test with empty stores."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("ARTIFACT_DIFF_CONFIG_DIR", str(config_dir))
    ConfigManager.reset_instance()
    get_artifact_store().clear()
    get_panel_registry().clear()
    panel_router.panel_artifacts.clear()
    yield config_dir
    ConfigManager.reset_instance()


@pytest.fixture
def history() -> Artifact:
    return Artifact(
        current_index=3,
        contents=[
            code_version(1, "a\nb\nc"),
            code_version(2, "a\nc"),
            text_version(3, "# Notes\nhello"),
        ],
    )

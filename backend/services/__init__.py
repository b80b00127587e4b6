"""Services module - Business logic layer"""

from .artifact_store import ArtifactStore, get_artifact_store
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, keyed_lines, split_lines
from .diff_panel import DiffPanel, PanelRegistry, get_panel_registry, render_comparison
from .exceptions import DiffComputationFailed, DiffPanelError, VersionNotFoundError
from .version_resolver import ResolvedComparison, VersionResolver

__all__ = [
    "ArtifactStore",
    "get_artifact_store",
    "ConfigManager",
    "DiffGenerator",
    "keyed_lines",
    "split_lines",
    "DiffPanel",
    "PanelRegistry",
    "get_panel_registry",
    "render_comparison",
    "DiffComputationFailed",
    "DiffPanelError",
    "VersionNotFoundError",
    "ResolvedComparison",
    "VersionResolver",
]

"""
Diff Panel - Render state for the artifact diff panel

The panel owns the currently displayed snapshot and replaces it wholesale on
every recomputation. Selecting a new comparison or closing the panel bumps a
generation counter; results computed for an older generation are dropped.
"""

from __future__ import annotations

import logging
from typing import Any

from models.artifact import Artifact, ChangeDescriptor
from models.diff import DiffFile
from models.panel import PanelSnapshot, PanelStatus

from .config_manager import DEFAULT_DIFF_SETTINGS
from .diff_generator import DiffGenerator
from .exceptions import DiffComputationFailed, VersionNotFoundError
from .version_resolver import VersionResolver

logger = logging.getLogger(__name__)


def render_comparison(
    history: Artifact,
    descriptor: ChangeDescriptor,
    resolver: VersionResolver,
    generator: DiffGenerator,
    settings: dict[str, Any] | None = None,
) -> PanelSnapshot:
    """
    Resolve and diff one comparison.

    A missing version yields a PENDING snapshot. DiffComputationFailed
    propagates to the caller.
    """
    settings = {**DEFAULT_DIFF_SETTINGS, **(settings or {})}

    try:
        resolved = resolver.resolve(history, descriptor)
    except VersionNotFoundError:
        return PanelSnapshot(status=PanelStatus.PENDING, label=descriptor.label, descriptor=descriptor)

    result = generator.build_diff(resolved.old_text, resolved.new_text)
    diff_file = DiffFile(
        old_path=resolved.file_name,
        new_path=resolved.file_name,
        old_revision=settings["oldRevision"],
        new_revision=settings["newRevision"],
        language=resolved.language,
        hunks=result.hunks,
    )

    return PanelSnapshot(
        status=PanelStatus.READY if result.has_changes else PanelStatus.NO_CHANGES,
        label=descriptor.label,
        descriptor=descriptor,
        file=diff_file,
        additions=result.additions,
        deletions=result.deletions,
    )


class DiffPanel:
    """Selection and render state of one diff panel"""

    def __init__(
        self,
        resolver: VersionResolver | None = None,
        generator: DiffGenerator | None = None,
        settings: dict[str, Any] | None = None,
    ):
        self.resolver = resolver or VersionResolver()
        self.generator = generator or DiffGenerator()
        self.settings = settings or {}
        self._descriptor: ChangeDescriptor | None = None
        self._generation = 0
        self._snapshot = PanelSnapshot()

    @property
    def snapshot(self) -> PanelSnapshot:
        return self._snapshot

    @property
    def descriptor(self) -> ChangeDescriptor | None:
        return self._descriptor

    @property
    def generation(self) -> int:
        return self._generation

    def apply_settings(self, settings: dict[str, Any]) -> None:
        """Use new diff settings for the next render"""
        self.settings = settings
        self.resolver.default_file_name = settings.get("defaultFileName", self.resolver.default_file_name)

    def select(self, descriptor: ChangeDescriptor) -> int:
        """Make ``descriptor`` the active comparison, superseding any other"""
        self._descriptor = descriptor
        self._generation += 1
        self._snapshot = PanelSnapshot(status=PanelStatus.PENDING, label=descriptor.label, descriptor=descriptor)
        return self._generation

    def close(self) -> None:
        """Clear the comparison; nothing renders until the next select"""
        self._descriptor = None
        self._generation += 1
        self._snapshot = PanelSnapshot()

    def compute(self, history: Artifact | None) -> tuple[int, PanelSnapshot]:
        """Compute a snapshot for the active descriptor without committing it"""
        generation = self._generation
        descriptor = self._descriptor
        if descriptor is None:
            return generation, PanelSnapshot()
        if history is None:
            return generation, PanelSnapshot(status=PanelStatus.PENDING, label=descriptor.label, descriptor=descriptor)

        try:
            snapshot = render_comparison(history, descriptor, self.resolver, self.generator, self.settings)
        except DiffComputationFailed:
            # Keep the last good render for this descriptor
            previous = self._snapshot
            snapshot = PanelSnapshot(
                status=PanelStatus.FAILED,
                label=descriptor.label,
                descriptor=descriptor,
                file=previous.file,
                additions=previous.additions,
                deletions=previous.deletions,
            )
        return generation, snapshot

    def commit(self, generation: int, snapshot: PanelSnapshot) -> bool:
        """Install ``snapshot`` unless a newer selection has superseded it"""
        if generation != self._generation:
            logger.debug("Discarding stale diff for generation %s (current %s)", generation, self._generation)
            return False
        self._snapshot = snapshot
        return True

    def refresh(self, history: Artifact | None) -> PanelSnapshot:
        """Recompute against the latest history and return the displayed snapshot"""
        generation, snapshot = self.compute(history)
        self.commit(generation, snapshot)
        return self._snapshot


class PanelRegistry:
    """Diff panels keyed by panel id"""

    def __init__(self):
        self._panels: dict[str, DiffPanel] = {}

    def get_or_create(self, panel_id: str, **kwargs: Any) -> DiffPanel:
        panel = self._panels.get(panel_id)
        if panel is None:
            panel = DiffPanel(**kwargs)
            self._panels[panel_id] = panel
        return panel

    def get(self, panel_id: str) -> DiffPanel | None:
        return self._panels.get(panel_id)

    def remove(self, panel_id: str) -> DiffPanel | None:
        return self._panels.pop(panel_id, None)

    def clear(self) -> None:
        self._panels.clear()


_registry: PanelRegistry | None = None


def get_panel_registry() -> PanelRegistry:
    """Get the process-wide panel registry"""
    global _registry
    if _registry is None:
        _registry = PanelRegistry()
    return _registry

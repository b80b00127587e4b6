"""Models module - Pydantic data models"""

from .artifact import Artifact, ArtifactType, ChangeDescriptor, ChangeType, VersionedContent
from .diff import (
    DiffFile,
    DiffHunk,
    DiffResult,
    DiffSegment,
    LineChange,
    LineChangeType,
    SegmentKind,
)
from .panel import DiffRequest, PanelSnapshot, PanelStatus, SelectRequest

__all__ = [
    # Artifact models
    "Artifact",
    "ArtifactType",
    "ChangeDescriptor",
    "ChangeType",
    "VersionedContent",
    # Diff models
    "DiffFile",
    "DiffHunk",
    "DiffResult",
    "DiffSegment",
    "LineChange",
    "LineChangeType",
    "SegmentKind",
    # Panel models
    "DiffRequest",
    "PanelSnapshot",
    "PanelStatus",
    "SelectRequest",
]

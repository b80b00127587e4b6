"""Diff panel request/response models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .artifact import Artifact, ChangeDescriptor
from .diff import DiffFile


class PanelStatus(str, Enum):
    """What the panel should currently display"""

    CLOSED = "closed"
    PENDING = "pending"  # history not loaded yet, show "Loading diff..."
    READY = "ready"
    NO_CHANGES = "no_changes"
    FAILED = "failed"


class PanelSnapshot(BaseModel):
    """Immutable render state handed to the panel UI"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: PanelStatus = PanelStatus.CLOSED
    label: str | None = None
    descriptor: ChangeDescriptor | None = None
    file: DiffFile | None = None
    additions: int = 0
    deletions: int = 0


class DiffRequest(BaseModel):
    """Stateless diff computation request"""

    model_config = ConfigDict(populate_by_name=True)

    artifact: Artifact
    descriptor: ChangeDescriptor


class SelectRequest(BaseModel):
    """Select the comparison attached to a message"""

    model_config = ConfigDict(populate_by_name=True)

    artifact_id: str = Field(alias="artifactId")
    diff_id: str = Field(alias="diffId")  # id of the message carrying the descriptor

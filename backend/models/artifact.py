"""Artifact history data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ArtifactType(str, Enum):
    """Kind of content stored in an artifact version"""

    CODE = "code"
    TEXT = "text"


class ChangeType(str, Enum):
    """How an artifact version came to be"""

    CREATE = "create"
    UPDATE = "update"


class VersionedContent(BaseModel):
    """One immutable snapshot of a document"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    index: int
    kind: ArtifactType = Field(alias="type")
    title: str | None = None
    code: str = ""
    language: str | None = None  # code artifacts only
    full_markdown: str = Field(default="", alias="fullMarkdown")

    @property
    def body(self) -> str:
        if self.kind == ArtifactType.CODE:
            return self.code
        return self.full_markdown


class Artifact(BaseModel):
    """Ordered version history of a document"""

    model_config = ConfigDict(populate_by_name=True)

    current_index: int = Field(default=1, alias="currentIndex")
    contents: list[VersionedContent] = []

    @model_validator(mode="after")
    def _check_unique_indices(self) -> "Artifact":
        seen: set[int] = set()
        for content in self.contents:
            if content.index in seen:
                raise ValueError(f"Duplicate version index: {content.index}")
            seen.add(content.index)
        return self

    def get_version(self, index: int | None) -> VersionedContent | None:
        """Return the version with the given index, if any"""
        if index is None:
            return None
        for content in self.contents:
            if content.index == index:
                return content
        return None


class ChangeDescriptor(BaseModel):
    """Which two versions of an artifact to compare"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    change_type: ChangeType = Field(alias="changeType")
    artifact_index: int = Field(alias="artifactIndex")
    previous_index: int | None = Field(default=None, alias="previousIndex")

    @property
    def label(self) -> str:
        if self.change_type == ChangeType.CREATE:
            return "Initial version"
        return f"Version {self.previous_index} → {self.artifact_index}"

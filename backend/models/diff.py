"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class LineChangeType(str, Enum):
    """Role of a single line in the rendered diff"""

    INSERT = "insert"
    DELETE = "delete"
    NORMAL = "normal"


class SegmentKind(str, Enum):
    """Classification of a run of lines produced by the line diff"""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class LineChange(BaseModel):
    """A single line of a hunk"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: LineChangeType
    content: str  # without line terminator
    old_line_number: int | None = Field(default=None, alias="oldLineNumber", ge=1)
    new_line_number: int | None = Field(default=None, alias="newLineNumber", ge=1)

    @model_validator(mode="after")
    def _check_numbering(self) -> "LineChange":
        has_old = self.type in (LineChangeType.DELETE, LineChangeType.NORMAL)
        has_new = self.type in (LineChangeType.INSERT, LineChangeType.NORMAL)
        if (self.old_line_number is not None) != has_old:
            raise ValueError(f"oldLineNumber must be {'set' if has_old else 'absent'} for {self.type.value} lines")
        if (self.new_line_number is not None) != has_new:
            raise ValueError(f"newLineNumber must be {'set' if has_new else 'absent'} for {self.type.value} lines")
        return self


class DiffHunk(BaseModel):
    """A positioned, numbered group of line changes"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    old_start: int = Field(default=1, alias="oldStart")
    old_lines: int = Field(alias="oldLines")
    new_start: int = Field(default=1, alias="newStart")
    new_lines: int = Field(alias="newLines")
    changes: list[LineChange]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def content(self) -> str:
        return f"@@ -{self.old_start},{self.old_lines} +{self.new_start},{self.new_lines} @@"


class DiffSegment(BaseModel):
    """A maximal run of lines sharing one classification"""

    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    lines: list[str]


class DiffResult(BaseModel):
    """Hunks plus aggregate statistics for one comparison"""

    model_config = ConfigDict(frozen=True)

    hunks: list[DiffHunk] = []
    additions: int = 0
    deletions: int = 0

    @property
    def has_changes(self) -> bool:
        return bool(self.hunks)


class DiffFile(BaseModel):
    """File payload consumed by the split diff view"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    old_path: str = Field(alias="oldPath")
    new_path: str = Field(alias="newPath")
    old_revision: str = Field(default="previous", alias="oldRevision")
    new_revision: str = Field(default="current", alias="newRevision")
    type: str = "modify"
    language: str | None = None
    hunks: list[DiffHunk] = []

"""Tests for the pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from models.artifact import Artifact, ArtifactType, ChangeDescriptor, ChangeType, VersionedContent
from models.diff import DiffHunk, LineChange, LineChangeType


class TestVersionedContent:
    def test_parses_wire_names(self) -> None:
        content = VersionedContent.model_validate(
            {"index": 1, "type": "text", "title": "Doc", "fullMarkdown": "# Hi"}
        )

        assert content.kind == ArtifactType.TEXT
        assert content.body == "# Hi"

    def test_code_body(self) -> None:
        content = VersionedContent(index=1, kind="code", code="print(1)", language="python")

        assert content.body == "print(1)"

    def test_is_immutable(self) -> None:
        content = VersionedContent(index=1, kind="code", code="x")

        with pytest.raises(ValidationError):
            content.code = "y"


class TestArtifact:
    def test_duplicate_indices_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Artifact(
                contents=[
                    VersionedContent(index=1, kind="code", code="a"),
                    VersionedContent(index=1, kind="code", code="b"),
                ]
            )

    def test_get_version(self) -> None:
        artifact = Artifact.model_validate(
            {"currentIndex": 2, "contents": [{"index": 2, "type": "code", "code": "x"}]}
        )

        assert artifact.current_index == 2
        assert artifact.get_version(2) is not None
        assert artifact.get_version(1) is None
        assert artifact.get_version(None) is None


class TestChangeDescriptor:
    def test_create_label(self) -> None:
        descriptor = ChangeDescriptor(change_type=ChangeType.CREATE, artifact_index=1)

        assert descriptor.label == "Initial version"

    def test_update_label(self) -> None:
        descriptor = ChangeDescriptor.model_validate({"changeType": "update", "artifactIndex": 3, "previousIndex": 2})

        assert descriptor.label == "Version 2 → 3"


class TestLineChange:
    def test_insert_has_only_new_number(self) -> None:
        change = LineChange(type=LineChangeType.INSERT, content="x", new_line_number=4)

        assert change.model_dump(by_alias=True) == {
            "type": LineChangeType.INSERT,
            "content": "x",
            "oldLineNumber": None,
            "newLineNumber": 4,
        }

    @pytest.mark.parametrize(
        "fields",
        [
            {"type": "insert", "old_line_number": 1, "new_line_number": 1},
            {"type": "insert"},
            {"type": "delete", "new_line_number": 1},
            {"type": "delete", "old_line_number": 1, "new_line_number": 1},
            {"type": "normal", "old_line_number": 1},
            {"type": "normal", "old_line_number": 0, "new_line_number": 1},
        ],
    )
    def test_numbering_must_match_role(self, fields: dict) -> None:
        with pytest.raises(ValidationError):
            LineChange(content="x", **fields)


def test_hunk_serializes_header_and_aliases() -> None:
    hunk = DiffHunk(
        old_lines=1,
        new_lines=1,
        changes=[LineChange(type="normal", content="a", old_line_number=1, new_line_number=1)],
    )

    data = hunk.model_dump(by_alias=True, mode="json")
    assert data["oldStart"] == 1
    assert data["newLines"] == 1
    assert data["content"] == "@@ -1,1 +1,1 @@"
    assert data["changes"][0]["type"] == "normal"

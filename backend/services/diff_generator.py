"""
Diff Generator Service - Fold a line diff into a numbered hunk for the diff panel
"""

from __future__ import annotations

import logging
import re
from difflib import SequenceMatcher

from models.diff import DiffHunk, DiffResult, DiffSegment, LineChange, LineChangeType, SegmentKind

from .exceptions import DiffComputationFailed

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")


def keyed_lines(text: str) -> list[tuple[str, str]]:
    """
    Split text into (preceding terminator, line) pairs.

    A trailing terminator adds one empty line, and a lone terminator is a
    single empty line. Keying each line on the terminator before it makes
    CRLF/LF differences compare unequal.
    """
    if not text:
        return []
    if _LINE_BREAK.fullmatch(text):
        return [(text, "")]
    parts = _LINE_BREAK.split(text)
    contents = parts[0::2]
    terminators = parts[1::2]
    return [("", contents[0]), *zip(terminators, contents[1:])]


def split_lines(text: str) -> list[str]:
    """Lines of ``text`` without terminators"""
    return [line for _, line in keyed_lines(text)]


def _segment(kind: SegmentKind, keyed: list[tuple[str, str]]) -> DiffSegment:
    return DiffSegment(kind=kind, lines=[line for _, line in keyed])


class DiffGenerator:
    """Generate side-by-side diff hunks for artifact versions"""

    def compute_segments(self, old_text: str, new_text: str) -> list[DiffSegment]:
        """Line-level diff as ordered added/removed/unchanged segments"""
        original = keyed_lines(old_text)
        modified = keyed_lines(new_text)
        matcher = SequenceMatcher(None, original, modified, autojunk=False)
        segments = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                segments.append(_segment(SegmentKind.UNCHANGED, original[i1:i2]))
                continue
            # Removed lines come before their replacement
            if i2 > i1:
                segments.append(_segment(SegmentKind.REMOVED, original[i1:i2]))
            if j2 > j1:
                segments.append(_segment(SegmentKind.ADDED, modified[j1:j2]))

        return segments

    def build_diff(self, old_text: str, new_text: str) -> DiffResult:
        """Build a single whole-document hunk with running line numbers"""
        try:
            segments = self.compute_segments(old_text, new_text)
        except Exception as e:
            logger.exception("Line diff failed")
            raise DiffComputationFailed(f"Failed to compute diff: {e}") from e

        changes: list[LineChange] = []
        old_line_number = 1
        new_line_number = 1
        additions = 0
        deletions = 0

        for segment in segments:
            if segment.kind == SegmentKind.ADDED:
                for line in segment.lines:
                    changes.append(
                        LineChange(type=LineChangeType.INSERT, content=line, new_line_number=new_line_number)
                    )
                    new_line_number += 1
                    additions += 1
            elif segment.kind == SegmentKind.REMOVED:
                for line in segment.lines:
                    changes.append(
                        LineChange(type=LineChangeType.DELETE, content=line, old_line_number=old_line_number)
                    )
                    old_line_number += 1
                    deletions += 1
            else:
                for line in segment.lines:
                    changes.append(
                        LineChange(
                            type=LineChangeType.NORMAL,
                            content=line,
                            old_line_number=old_line_number,
                            new_line_number=new_line_number,
                        )
                    )
                    old_line_number += 1
                    new_line_number += 1

        # Identical texts render as "no changes", not as an all-context hunk
        hunks = []
        if additions or deletions:
            hunks.append(
                DiffHunk(
                    old_start=1,
                    old_lines=old_line_number - 1,
                    new_start=1,
                    new_lines=new_line_number - 1,
                    changes=changes,
                )
            )

        return DiffResult(hunks=hunks, additions=additions, deletions=deletions)

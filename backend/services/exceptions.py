"""Exceptions raised by the diff services"""

from __future__ import annotations


class DiffPanelError(Exception):
    """Base class for diff service errors"""


class VersionNotFoundError(DiffPanelError):
    """Requested artifact version is not (yet) in the history"""

    def __init__(self, artifact_index: int):
        super().__init__(f"Artifact version {artifact_index} not found")
        self.artifact_index = artifact_index


class DiffComputationFailed(DiffPanelError):
    """The line diff raised an unexpected error"""

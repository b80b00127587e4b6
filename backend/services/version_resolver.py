"""
Version Resolver - Pick the two artifact versions a diff compares
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from models.artifact import Artifact, ChangeDescriptor, ChangeType

from .exceptions import VersionNotFoundError

logger = logging.getLogger(__name__)


class ResolvedComparison(BaseModel):
    """Old and new text for one comparison"""

    model_config = ConfigDict(frozen=True)

    old_text: str
    new_text: str
    file_name: str
    language: str | None = None


class VersionResolver:
    """Look up comparison inputs in an artifact's version history"""

    def __init__(self, default_file_name: str = "Untitled"):
        self.default_file_name = default_file_name

    def resolve(self, history: Artifact, descriptor: ChangeDescriptor) -> ResolvedComparison:
        """
        Return the texts to compare for ``descriptor``.

        Raises VersionNotFoundError when the requested version is missing,
        which usually means the history is still loading. A missing previous
        version, or one of a different kind, compares against empty text.
        """
        current = history.get_version(descriptor.artifact_index)
        if current is None:
            logger.debug("Version %s not in history", descriptor.artifact_index)
            raise VersionNotFoundError(descriptor.artifact_index)

        old_text = ""
        if descriptor.change_type == ChangeType.UPDATE:
            previous = history.get_version(descriptor.previous_index)
            if previous is not None and previous.kind == current.kind:
                old_text = previous.body

        return ResolvedComparison(
            old_text=old_text,
            new_text=current.body,
            file_name=current.title or self.default_file_name,
            language=current.language,
        )

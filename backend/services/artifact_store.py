"""
Artifact Store - In-memory artifact histories and diff descriptors
"""

from __future__ import annotations

from models.artifact import Artifact, ChangeDescriptor, VersionedContent


class ArtifactStore:
    """Keep artifact histories and the diff info attached to messages"""

    def __init__(self):
        self._artifacts: dict[str, Artifact] = {}
        self._diff_infos: dict[tuple[str, str], ChangeDescriptor] = {}

    def put_artifact(self, artifact_id: str, artifact: Artifact) -> Artifact:
        self._artifacts[artifact_id] = artifact
        return artifact

    def get_artifact(self, artifact_id: str) -> Artifact | None:
        return self._artifacts.get(artifact_id)

    def append_version(self, artifact_id: str, content: VersionedContent) -> Artifact:
        """Add a version, creating the artifact on first use. Indices must increase."""
        artifact = self._artifacts.get(artifact_id) or Artifact(current_index=content.index, contents=[])
        if artifact.contents and content.index <= max(c.index for c in artifact.contents):
            raise ValueError(f"Version index {content.index} must be greater than existing indices")

        # Histories are replaced, never mutated in place
        updated = Artifact(current_index=content.index, contents=[*artifact.contents, content])
        self._artifacts[artifact_id] = updated
        return updated

    def put_diff_info(self, artifact_id: str, message_id: str, descriptor: ChangeDescriptor) -> None:
        self._diff_infos[(artifact_id, message_id)] = descriptor

    def get_diff_info(self, artifact_id: str, message_id: str) -> ChangeDescriptor | None:
        return self._diff_infos.get((artifact_id, message_id))

    def clear(self) -> None:
        self._artifacts.clear()
        self._diff_infos.clear()


_store: ArtifactStore | None = None


def get_artifact_store() -> ArtifactStore:
    """Get the process-wide artifact store"""
    global _store
    if _store is None:
        _store = ArtifactStore()
    return _store

"""Artifact history API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.artifact import Artifact, ChangeDescriptor, VersionedContent
from services.artifact_store import get_artifact_store

router = APIRouter()


@router.put("/{artifact_id}", response_model=Artifact)
async def put_artifact(artifact_id: str, artifact: Artifact) -> Artifact:
    """Store or replace an artifact's version history"""
    return get_artifact_store().put_artifact(artifact_id, artifact)


@router.get("/{artifact_id}", response_model=Artifact)
async def get_artifact(artifact_id: str) -> Artifact:
    """Get an artifact's version history"""
    artifact = get_artifact_store().get_artifact(artifact_id)
    if artifact is None:
        raise HTTPException(status_code=404, detail=f"Artifact not found: {artifact_id}")
    return artifact


@router.post("/{artifact_id}/versions", response_model=Artifact)
async def append_version(artifact_id: str, content: VersionedContent) -> Artifact:
    """Append a new version to an artifact"""
    try:
        return get_artifact_store().append_version(artifact_id, content)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{artifact_id}/diff-messages/{message_id}", response_model=ChangeDescriptor)
async def put_diff_message(artifact_id: str, message_id: str, descriptor: ChangeDescriptor) -> ChangeDescriptor:
    """Attach diff info to a message so the panel can select it by message id"""
    get_artifact_store().put_diff_info(artifact_id, message_id, descriptor)
    return descriptor

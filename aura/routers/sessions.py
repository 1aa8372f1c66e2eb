"""
FastAPI router for storefront sessions.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from common.utils import NotFoundException

from aura.dependencies import get_session_store
from aura.services.session.session_store import SessionStore

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(
    store: Annotated[SessionStore, Depends(get_session_store)],
):
    """Start a session with an empty cart in the default language."""
    session = await store.create_session()
    return {
        "sessionId": session.id,
        "language": session.language.language,
        "createdAt": session.created_at,
    }


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
):
    if not await store.delete_session(session_id):
        raise NotFoundException("Session not found", code="SESSION_NOT_FOUND")
    return {"deleted": True}

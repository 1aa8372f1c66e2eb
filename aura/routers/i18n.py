"""
FastAPI router for language selection and translation lookups.

Lookups never wait for the AI provider: misses return the source text and
are translated in the background. Clients poll the session state (or repeat
the lookup) until isTranslating turns false.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import ValidationException

from aura.dependencies import get_language_config, get_session
from aura.schemas.i18n import (
    LanguageResponse,
    LanguagesListResponse,
    LanguageStateResponse,
    LookupRequest,
    LookupResponse,
    SetLanguageRequest,
)
from aura.services.i18n.language_config import LanguageConfig
from aura.services.session.session_store import StorefrontSession

logger = logging.getLogger(__name__)

router = APIRouter(tags=["i18n"])


def _state_response(session: StorefrontSession) -> LanguageStateResponse:
    state = session.language.state()
    return LanguageStateResponse(
        language=state.language,
        isTranslating=state.is_translating,
        pending=list(state.pending),
        cached=state.cached,
        overlay=session.loader.overlay(),
    )


@router.get("/i18n/languages", response_model=LanguagesListResponse)
async def get_languages(
    language_config: Annotated[LanguageConfig, Depends(get_language_config)],
):
    """
    Get list of supported languages.

    Returns all available languages with their codes and display names.
    """
    languages = language_config.get_supported_languages()

    return LanguagesListResponse(
        languages=[LanguageResponse(**lang) for lang in languages]
    )


@router.get("/sessions/{session_id}/i18n", response_model=LanguageStateResponse)
async def get_language_state(
    session: Annotated[StorefrontSession, Depends(get_session)],
):
    return _state_response(session)


@router.put("/sessions/{session_id}/i18n/language", response_model=LanguageStateResponse)
async def set_language(
    body: SetLanguageRequest,
    session: Annotated[StorefrontSession, Depends(get_session)],
    language_config: Annotated[LanguageConfig, Depends(get_language_config)],
):
    """Switch the session language; untranslated texts are re-requested."""
    if not language_config.is_supported(body.language):
        raise ValidationException(
            message=f"Unsupported language: {body.language}",
            code="UNSUPPORTED_LANGUAGE",
        )

    session.language.set_language(body.language)
    return _state_response(session)


@router.post("/sessions/{session_id}/i18n/lookup", response_model=LookupResponse)
async def lookup_translations(
    body: LookupRequest,
    session: Annotated[StorefrontSession, Depends(get_session)],
):
    provider = session.language
    translated = provider.translate_many(body.texts)

    return LookupResponse(
        language=provider.language,
        translations=dict(zip(body.texts, translated)),
        isTranslating=provider.is_translating,
    )

"""
Pydantic models for language selection and translation lookups.
"""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


class LanguageResponse(BaseModel):
    code: str
    label: str
    isDefault: bool


class LanguagesListResponse(BaseModel):
    languages: List[LanguageResponse]


class SetLanguageRequest(BaseModel):
    """Switch the session's display language."""
    language: str = Field(..., min_length=2, max_length=40)


class LookupRequest(BaseModel):
    """Texts the page is about to render."""
    texts: List[str] = Field(..., max_length=500)


class OverlayResponse(BaseModel):
    visible: bool
    language: str
    message: str


class LookupResponse(BaseModel):
    """
    Current best text for each requested string.

    Misses come back untranslated and are filled in by a later lookup
    once the background batch has finished.
    """
    language: str
    translations: Dict[str, str]
    isTranslating: bool


class LanguageStateResponse(BaseModel):
    language: str
    isTranslating: bool
    pending: List[str]
    cached: int
    overlay: Optional[OverlayResponse] = None

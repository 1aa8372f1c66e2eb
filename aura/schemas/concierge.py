"""
Pydantic models for concierge chat requests and responses.
"""

from typing import Literal, Optional, List
from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    """One earlier message in the conversation."""
    role: Literal["user", "model"]
    text: str


class ConciergeChatRequest(BaseModel):
    """A shopper message with the conversation so far."""
    message: str = Field(..., min_length=1, max_length=5000)
    history: List[ChatTurn] = []
    productId: Optional[str] = Field(default=None, description="Product page the shopper is viewing")
    imageBase64: Optional[str] = Field(default=None, description="JPEG attached to this turn")


class ConciergeChatResponse(BaseModel):
    """The concierge's reply, with an image when edit_image ran."""
    text: str
    imageBase64: Optional[str] = None

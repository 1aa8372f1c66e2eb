"""Concierge services."""

from aura.services.concierge.concierge_service import (
    ConciergeReply,
    ConciergeService,
    build_system_instruction,
)

__all__ = ["ConciergeReply", "ConciergeService", "build_system_instruction"]

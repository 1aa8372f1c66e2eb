"""Session services."""

from aura.services.session.session_store import SessionStore, StorefrontSession

__all__ = ["SessionStore", "StorefrontSession"]

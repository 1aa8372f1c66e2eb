"""Media services."""

from aura.services.media.image_service import ImageService

__all__ = ["ImageService"]

"""Catalog services."""

from aura.services.catalog.catalog_service import CatalogService
from aura.services.catalog.products import PRODUCTS

__all__ = ["CatalogService", "PRODUCTS"]

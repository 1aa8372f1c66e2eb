"""
Catalog service.

Product lookup and related-product selection over the static catalog.
"""

from typing import List, Optional, Sequence

from aura.schemas.catalog import Product


WEARABLE_SIZES = ["S", "M", "L"]
RELATED_LIMIT = 3


class CatalogService:
    """Read-only access to the product catalog."""

    def __init__(self, products: Sequence[Product]):
        self._products = list(products)
        self._by_id = {p.id: p for p in self._products}

    def list_products(self, category: Optional[str] = None) -> List[Product]:
        if category:
            return [p for p in self._products if p.category.lower() == category.lower()]
        return list(self._products)

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def get_related(self, product: Product, limit: int = RELATED_LIMIT) -> List[Product]:
        """
        Products related to the given one.

        Same-category products come first, then the rest of the catalog
        in listing order. The product itself is never included.
        """
        others = [p for p in self._products if p.id != product.id]
        same_category = [p for p in others if p.category == product.category]
        remaining = [p for p in others if p.category != product.category]
        return (same_category + remaining)[:limit]

    @staticmethod
    def sizes_for(product: Product) -> List[str]:
        """Size options shown on the detail page (wearables only)."""
        return list(WEARABLE_SIZES) if product.category == "Wearable" else []

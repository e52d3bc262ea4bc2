"""Abstract repository for the product and add-on catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is read-only static data.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_builder.domain.model.catalog import AddOn, Product


class CatalogRepository(ABC):

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return every product with its plans."""

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_add_ons(self) -> list[AddOn]:
        """Return the standard add-ons in their default state."""

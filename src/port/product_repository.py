"""Port definition for ProductRepository."""

from typing import Protocol

from domain.model.product import Category, Product


class ProductRepository(Protocol):
    def create(
        self,
        title: str,
        price: float,
        description: str,
        category: Category,
        brand: str,
        image_url: list[str],
    ) -> Product: ...

    def get_by_id(self, product_id: str) -> Product | None: ...

    def find_all(self) -> list[Product]: ...

    def delete(self, product_id: str) -> Product | None:
        """Remove a product. Return the removed Product or None if it did not exist."""
        ...

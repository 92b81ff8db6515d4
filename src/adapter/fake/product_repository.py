"""In-memory implementation of ProductRepository for testing."""

import uuid
from datetime import datetime, timezone

from domain.model.product import Category, Product


class FakeProductRepository:
    def __init__(self):
        self.store: dict[str, Product] = {}

    def create(
        self,
        title: str,
        price: float,
        description: str,
        category: Category,
        brand: str,
        image_url: list[str],
    ) -> Product:
        product = Product(
            id=uuid.uuid4().hex,
            title=title,
            price=price,
            description=description,
            category=category,
            brand=brand,
            created_at=datetime.now(timezone.utc),
            image_url=list(image_url),
        )
        self.store[product.id] = product
        return product

    def delete(self, product_id: str) -> Product | None:
        return self.store.pop(product_id, None)

    def get_by_id(self, product_id: str) -> Product | None:
        return self.store.get(product_id)

    def find_all(self) -> list[Product]:
        return sorted(self.store.values(), key=lambda p: p.created_at, reverse=True)

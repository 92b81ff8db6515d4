"""MongoDB implementation of ProductRepository."""

import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import PRODUCTS_COLLECTION_NAME
from adapter.mongodb.indexes import create_index
from domain.model.errors import InternalError
from domain.model.product import Category, Product

logger = getLogger(__name__)


class MongoProductRepository:
    def __init__(self, db: Database):
        self.collection = db[PRODUCTS_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for products collection."""
        try:
            create_index(self.collection, [('created_at', -1)], 'idx_products_created_at')
            create_index(self.collection, [('category.id', 1)], 'idx_products_category')
            return True
        except PyMongoError as e:
            logger.error("Failed to create products indexes", extra={"error": str(e)})
            return False

    # ── helpers ──────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Product:
        """Convert MongoDB document to Product domain model."""
        return Product(
            id=doc['_id'],
            title=doc['title'],
            price=doc['price'],
            description=doc['description'],
            category=Category(**doc['category']),
            brand=doc['brand'],
            created_at=doc['created_at'],
            image_url=list(doc.get('image_url', [])),
        )

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        title: str,
        price: float,
        description: str,
        category: Category,
        brand: str,
        image_url: list[str],
    ) -> Product:
        product_id = uuid.uuid4().hex
        doc = {
            '_id': product_id,
            'title': title,
            'price': price,
            'description': description,
            'category': asdict(category),
            'brand': brand,
            'image_url': list(image_url),
            'created_at': datetime.now(timezone.utc),
        }
        try:
            self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Failed to create product", extra={"title": title, "error": str(e)})
            raise InternalError(str(e)) from e

        logger.info("Product created", extra={"productId": product_id})
        return self._to_domain(doc)

    def delete(self, product_id: str) -> Product | None:
        """Hard delete; returns the removed product."""
        try:
            doc = self.collection.find_one_and_delete({'_id': product_id})
        except PyMongoError as e:
            logger.error("Failed to delete product", extra={"productId": product_id, "error": str(e)})
            raise InternalError(str(e)) from e

        if doc is None:
            logger.warning("Product not found for deletion", extra={"productId": product_id})
            return None

        logger.info("Product deleted", extra={"productId": product_id})
        return self._to_domain(doc)

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, product_id: str) -> Product | None:
        try:
            doc = self.collection.find_one({'_id': product_id})
        except PyMongoError as e:
            logger.error("Failed to retrieve product", extra={"productId": product_id, "error": str(e)})
            raise InternalError(str(e)) from e
        return self._to_domain(doc) if doc else None

    def find_all(self) -> list[Product]:
        try:
            docs = list(self.collection.find({}).sort('created_at', -1))
        except PyMongoError as e:
            logger.error("Failed to list products", extra={"error": str(e)})
            raise InternalError(str(e)) from e
        return [self._to_domain(doc) for doc in docs]

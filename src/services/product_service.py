"""Product service — catalogue CRUD business logic."""

import math
from numbers import Real

from domain.model.errors import NotFoundError, ValidationError
from domain.model.product import Category, Product
from port.product_repository import ProductRepository


def _require_text(field: str, value) -> None:
    if value is None:
        raise ValidationError(f'"{field}" is required')
    if not isinstance(value, str):
        raise ValidationError(f'"{field}" must be a string')
    if not value.strip():
        raise ValidationError(f'"{field}" is not allowed to be empty')


def _validate_price(price) -> None:
    if price is None:
        raise ValidationError('"price" is required')
    if isinstance(price, bool) or not isinstance(price, Real):
        raise ValidationError('"price" must be a number')
    if not math.isfinite(price):
        raise ValidationError('"price" must be a finite number')
    if price < 0:
        raise ValidationError('"price" must be greater than or equal to 0')


def _validate_category(category) -> None:
    if category is None:
        raise ValidationError('"category" is required')
    if not isinstance(category, Category):
        raise ValidationError('"category" must be an object')
    if isinstance(category.id, bool) or not isinstance(category.id, int):
        raise ValidationError('"category.id" must be an integer')
    _require_text("category.name", category.name)
    _require_text("category.image", category.image)


def _validate_images(image_url) -> None:
    if image_url is None:
        raise ValidationError('"image_url" is required')
    if not isinstance(image_url, list):
        raise ValidationError('"image_url" must be an array')
    if not image_url:
        raise ValidationError('"image_url" must contain at least 1 items')
    for i, url in enumerate(image_url):
        _require_text(f"image_url[{i}]", url)


def create_product(
    repo: ProductRepository,
    title: str,
    price: float,
    description: str,
    category: Category,
    brand: str,
    image_url: list[str],
) -> Product:
    """Validate and persist a new product.

    Fields are checked in declaration order; the first failure is reported.

    Raises:
        ValidationError: a field is missing or malformed
    """
    _require_text("title", title)
    _validate_price(price)
    _require_text("description", description)
    _validate_category(category)
    _require_text("brand", brand)
    _validate_images(image_url)

    return repo.create(
        title=title,
        price=price,
        description=description,
        category=category,
        brand=brand,
        image_url=image_url,
    )


def get_product(repo: ProductRepository, product_id: str) -> Product:
    product = repo.get_by_id(product_id)
    if not product:
        raise NotFoundError("Product not found")
    return product


def list_products(repo: ProductRepository) -> list[Product]:
    return repo.find_all()


def delete_product(repo: ProductRepository, product_id: str) -> Product:
    """Delete a product and return it.

    Raises:
        NotFoundError: no product with this ID
    """
    product = repo.delete(product_id)
    if not product:
        raise NotFoundError("Product not found")
    return product

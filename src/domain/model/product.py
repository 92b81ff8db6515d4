# domain/model/product.py

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Category:
    """Category a product is listed under."""
    id: int
    name: str
    image: str


@dataclass
class Product:
    """Domain model representing a catalogue product."""
    id: str
    title: str
    price: float
    description: str
    category: Category
    brand: str
    created_at: datetime
    image_url: list[str] = field(default_factory=list)

"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from domain.model.product import Product
from domain.model.user import User


class RegisterRequest(BaseModel):
    """Request model for user registration.

    Fields are optional here so the auth service reports the first failing
    field in its own order (firstname, lastname, email, password).
    """
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: str
    password: str


class UserResponse(BaseModel):
    """Public view of a user. The password hash is never exposed."""
    id: str = Field(..., description="User ID (MongoDB _id)")
    firstname: str
    lastname: str
    email: str
    role: Optional[str] = Field(None, description="Optional classification, unset at registration")
    created_at: datetime = Field(..., description="Account creation timestamp")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            firstname=user.firstname,
            lastname=user.lastname,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        )


class RegisterResponse(BaseModel):
    data: UserResponse
    message: str


class LoginResponse(BaseModel):
    status: bool = Field(..., description="True when login succeeded")
    message: str
    token: str = Field(..., description="Signed JWT access token")


class CategoryModel(BaseModel):
    id: int
    name: str
    image: str


class ProductRequest(BaseModel):
    """Request model for creating a product."""
    title: str
    price: float
    description: str
    category: CategoryModel
    brand: str
    image_url: list[str]


class ProductResponse(BaseModel):
    id: str = Field(..., description="Product ID")
    title: str
    price: float
    description: str
    category: CategoryModel
    brand: str
    image_url: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            description=product.description,
            category=CategoryModel(
                id=product.category.id,
                name=product.category.name,
                image=product.category.image,
            ),
            brand=product.brand,
            image_url=product.image_url,
            created_at=product.created_at,
        )


class DeleteProductResponse(BaseModel):
    message: str
    product: ProductResponse

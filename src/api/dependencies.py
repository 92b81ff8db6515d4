from fastapi import Depends, HTTPException

from adapter.security.jose_token_issuer import JoseTokenIssuer
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.product_repository import MongoProductRepository
from adapter.mongodb.user_repository import MongoUserRepository
from api.config import Settings, get_settings
from port.product_repository import ProductRepository
from port.token_issuer import TokenIssuer
from port.user_repository import UserRepository


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


def get_product_repo() -> ProductRepository:
    return MongoProductRepository(_get_db())


def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    return JoseTokenIssuer(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expires_days=settings.jwt_expiration_days,
    )

"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before modules that read env vars at import time (MongoDB connection)
load_dotenv()

# main.py is at <root>/src/api/main.py
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import register_exception_handlers
from api.routes import auth, health, products, users
from utils.logging import setup_structured_logging
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.product_repository import MongoProductRepository
from adapter.mongodb.user_repository import MongoUserRepository
from api.config import get_settings

setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Storefront API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic."""
    # Tokens cannot be signed without a secret; fail before serving anything
    get_settings().validate()

    client = get_mongodb_client()
    if client:
        db = client[DATABASE_NAME]
        # Email uniqueness depends on idx_users_email; without it concurrent
        # registrations could store duplicate emails
        if not MongoUserRepository(db).ensure_indexes():
            logger.error(
                "Cannot guarantee unique user emails: idx_users_email could not be created",
                extra={"index": "idx_users_email"},
            )
            raise RuntimeError("Unique index idx_users_email is missing; refusing to start")
        if not MongoProductRepository(db).ensure_indexes():
            logger.warning("Failed to create product indexes")
        else:
            logger.info("MongoDB indexes verified/created successfully")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="E-commerce backend: products, user registration and login",
    version=VERSION,
    lifespan=lifespan,
)

# Browsers reject credentials with a wildcard origin
cors_origins_env = os.getenv("CORS_ORIGINS", "*")

if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
    logger.warning(
        "CORS configured with wildcard origin ('*'). "
        "For production, set CORS_ORIGINS to specific domains (e.g., 'https://shop.example.com')"
    )
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(products.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # Application logs already go through structured logging
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )

"""Shared MongoDB client for the storefront database."""

import os
import logging
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are noisy at INFO
logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'storefront')

_client: MongoClient | None = None


def get_mongodb_client() -> MongoClient | None:
    """Return the process-wide client, or None if MongoDB is unconfigured or unreachable.

    The client is built once; pymongo pools and reconnects by itself, so a
    failed ping only means "unavailable right now" and the client is kept.
    Datetimes come back timezone-aware (UTC), matching what the repositories write.
    """
    global _client

    if not MONGO_URL:
        logger.error("MONGO_URL not configured")
        return None

    if _client is None:
        _client = MongoClient(
            MONGO_URL,
            tz_aware=True,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            maxPoolSize=10,
        )
        logger.info("MongoDB client created", extra={"database": DATABASE_NAME})

    try:
        _client.admin.command('ping')
    except PyMongoError as e:
        logger.warning("MongoDB ping failed", extra={"error": str(e)[:200]})
        return None
    return _client

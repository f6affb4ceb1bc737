"""MongoDB connection lifecycle management.

Uses a module-level singleton client for the admin API. Call connect_db() at
app startup (via the FastAPI lifespan) before using get_database().
The seed script opens its own short-lived client through open_client().
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConfigurationError as PyMongoConfigurationError
from pymongo.errors import OperationFailure, PyMongoError

from wanderlust.config import Settings, settings
from wanderlust.seeding.errors import SeedConnectionError

logger = logging.getLogger(__name__)

client: Optional[AsyncIOMotorClient] = None


def get_database() -> AsyncIOMotorDatabase:
    if client is None:
        raise RuntimeError("Database client is not initialized. Call connect_db() first.")
    return client[settings.DATABASE_NAME]


async def connect_db() -> None:
    global client
    client = AsyncIOMotorClient(
        settings.MONGODB_URI, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS
    )


async def disconnect_db() -> None:
    global client
    if client:
        client.close()
        client = None


async def open_client(config: Settings) -> AsyncIOMotorClient:
    """Create a client and make sure the server answers before returning it.

    Motor connects lazily, so a bad host or bad credentials would otherwise
    only surface on the first write. Pinging here keeps connection failures
    ahead of the destructive delete.
    """
    try:
        new_client = AsyncIOMotorClient(
            config.MONGODB_URI, serverSelectionTimeoutMS=config.MONGODB_TIMEOUT_MS
        )
    except PyMongoConfigurationError as exc:
        raise SeedConnectionError(f"Invalid MongoDB URI: {exc}") from exc

    try:
        await new_client.admin.command("ping")
    except OperationFailure as exc:
        new_client.close()
        raise SeedConnectionError(f"MongoDB rejected the connection: {exc}") from exc
    except PyMongoError as exc:
        new_client.close()
        raise SeedConnectionError(f"Could not reach MongoDB: {exc}") from exc

    logger.debug("Connected to MongoDB database '%s'", config.DATABASE_NAME)
    return new_client

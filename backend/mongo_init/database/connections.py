"""
MongoDB connection management.

The client is acquired for the duration of one initializer run and always
released on exit.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from mongo_init.config import Settings, get_settings

logger = logging.getLogger("mongo_init")


@asynccontextmanager
async def open_mongo_client(
    settings: Optional[Settings] = None,
) -> AsyncIterator[AsyncIOMotorClient]:
    """
    Open a MongoDB client, verify the server is reachable and close it on exit.

    The ping is the first command sent; nothing is written before it succeeds.
    """
    settings = settings or get_settings()
    client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )
    try:
        await client.admin.command("ping")
        logger.info("Connected to MongoDB")
        yield client
    finally:
        client.close()
        logger.info("Disconnected")


def get_database(client: AsyncIOMotorClient, db_name: str) -> AsyncIOMotorDatabase:
    """Get a specific MongoDB database by name."""
    return client[db_name]

#!/usr/bin/env python3
"""
myapp MongoDB initializer - container bootstrap entry point.

Creates the application user, the users collection and the sample records
on a freshly started MongoDB, then logs the completion message.

Usage:
    python -m mongo_init

Environment Variables:
    MONGO_URI: MongoDB connection string (default: mongodb://localhost:27017)
    MONGO_SERVER_SELECTION_TIMEOUT_MS: Driver server selection timeout (default: 5000)
    SEED_TIMEOUT_SECONDS: Upper bound on the whole run (default: unbounded)
    LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging
import sys
from typing import Optional

from mongo_init.config import Settings, get_settings
from mongo_init.database.connections import open_mongo_client, get_database
from mongo_init.database.databases import myapp_db
from mongo_init.models.seed import SeedResult
from mongo_init.services.seed_service import MongoSeeder

logger = logging.getLogger("mongo_init")


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def seed(settings: Optional[Settings] = None) -> SeedResult:
    """Open a client, seed the application database and release the client."""
    settings = settings or get_settings()

    async with open_mongo_client(settings) as client:
        seeder = MongoSeeder(get_database(client, myapp_db.DB_NAME))
        if settings.seed_timeout_seconds is None:
            return await seeder.run()
        return await asyncio.wait_for(seeder.run(), timeout=settings.seed_timeout_seconds)


def main() -> None:
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings)

    try:
        asyncio.run(seed(settings))
    except Exception as e:
        logger.error(f"Initialization failed: {e!r}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
Seeder for the application database.

Runs the provisioning steps strictly in order against an explicitly passed
database handle. Nothing is checked for existence first and no driver error
is caught: a user or collection left over from an earlier run makes the
whole run fail, while the writes that already succeeded stay in place.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from mongo_init.database.databases import myapp_db
from mongo_init.models.seed import SeedResult
from mongo_init.models.user import AppCredential, UserRecord

logger = logging.getLogger("mongo_init")


class MongoSeeder:
    """Provisions the application user, collection and sample records."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the target database."""
        self.db = db

    async def create_app_user(self, credential: AppCredential) -> None:
        """
        Create the application user on the target database.

        Raises:
            OperationFailure: If the user already exists or the caller
                lacks the privilege to create users.
        """
        await self.db.command(
            "createUser",
            credential.user,
            pwd=credential.pwd,
            roles=[grant.model_dump() for grant in credential.roles],
        )
        logger.info(
            f"Created user '{credential.user}' with roles "
            f"{[grant.role for grant in credential.roles]} on {self.db.name}"
        )

    async def create_collection(self, name: str) -> None:
        """
        Create a collection with default options.

        Raises:
            CollectionInvalid: If the collection already exists.
        """
        await self.db.create_collection(name)
        logger.info(f"Created collection '{name}'")

    async def insert_records(
        self,
        collection: str,
        records: Iterable[dict[str, Any]],
    ) -> list[Any]:
        """
        Insert records as one ordered batch.

        Each document gets its own created_at, taken as it is built, so the
        timestamps never decrease in insertion order.

        Returns:
            The inserted document ids, in insertion order.
        """
        documents = [UserRecord(**record).model_dump() for record in records]
        result = await self.db[collection].insert_many(documents)
        logger.info(f"Inserted {len(result.inserted_ids)} documents into '{collection}'")
        return list(result.inserted_ids)

    async def run(
        self,
        credential: Optional[AppCredential] = None,
        collection: str = myapp_db.Collections.USERS,
        records: Optional[Iterable[dict[str, Any]]] = None,
    ) -> SeedResult:
        """
        Run every provisioning step, then log the completion message.

        Any exception aborts the remaining steps and propagates.
        """
        credential = credential or AppCredential(**myapp_db.APP_USER)
        records = myapp_db.SAMPLE_USERS if records is None else records

        started_at = datetime.now(timezone.utc)

        await self.create_app_user(credential)
        await self.create_collection(collection)
        inserted_ids = await self.insert_records(collection, records)

        logger.info(myapp_db.COMPLETION_MESSAGE)

        return SeedResult(
            db_name=self.db.name,
            user=credential.user,
            collection=collection,
            inserted_ids=inserted_ids,
            started_at=started_at,
            finished_at=datetime.now(timezone.utc),
        )

import logging
from typing import Iterable, Optional, Union

import bson
from bson import ObjectId
from bson.errors import InvalidDocument
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import BulkWriteError, ConnectionFailure, PyMongoError

from wanderlust.config import Settings, settings
from wanderlust.database import open_client
from wanderlust.seeding.dataset import load_dataset
from wanderlust.seeding.errors import ConfigurationError, SeedConnectionError, StoreError
from wanderlust.seeding.models import SeedResult, SeedStatus

logger = logging.getLogger(__name__)


def owner_value(owner_id: str) -> Union[ObjectId, str]:
    """Value actually stored in the owner field.

    Listings reference users by ObjectId, so a 24-hex owner id is stored as
    one. Any other identifier is stored as the plain string.
    """
    if ObjectId.is_valid(owner_id):
        return ObjectId(owner_id)
    return owner_id


def stamp_owner(records: Iterable[dict], owner_id: str) -> list[dict]:
    """Return copies of records with owner overwritten.

    Any owner already present in a record is replaced. The input records are
    left untouched, which matters because insert_many adds _id to what it is
    given.
    """
    owner = owner_value(owner_id)
    return [{**record, "owner": owner} for record in records]


def check_encodable(docs: list[dict]) -> None:
    """Raise StoreError for the first record BSON cannot represent.

    insert_many only encodes after the delete has run, so a bad record found
    there would leave the collection empty.
    """
    for index, doc in enumerate(docs):
        try:
            bson.encode(doc)
        except (InvalidDocument, OverflowError) as exc:
            raise StoreError(f"Record {index} cannot be stored: {exc}") from exc


async def reset_collection(
    collection: AsyncIOMotorCollection,
    records: Iterable[dict],
    owner_id: str,
) -> SeedResult:
    """Replace everything in collection with records stamped with owner_id.

    Records are stamped and checked for BSON encoding first, then the
    collection is cleared and the records go in as one ordered batch.
    Nothing is rolled back on failure; re-running restores the baseline.
    """
    docs = stamp_owner(records, owner_id)
    check_encodable(docs)

    try:
        deleted = await collection.delete_many({})  # destructive: wipes the collection
    except ConnectionFailure as exc:
        raise SeedConnectionError(f"Lost connection to MongoDB: {exc}") from exc
    except PyMongoError as exc:
        raise StoreError(f"Failed to clear '{collection.name}': {exc}") from exc

    inserted_count = 0
    # insert_many refuses an empty batch; an empty dataset just leaves the collection empty
    if docs:
        try:
            result = await collection.insert_many(docs, ordered=True)
        except BulkWriteError as exc:
            written = exc.details.get("nInserted", 0)
            raise StoreError(
                f"Batch insert into '{collection.name}' failed after {written} "
                f"of {len(docs)} records: {exc}",
                inserted_count=written,
            ) from exc
        except ConnectionFailure as exc:
            raise SeedConnectionError(f"Lost connection to MongoDB: {exc}") from exc
        except PyMongoError as exc:
            raise StoreError(f"Batch insert into '{collection.name}' failed: {exc}") from exc
        inserted_count = len(result.inserted_ids)

    return SeedResult(
        database=collection.database.name,
        collection=collection.name,
        owner_id=owner_id,
        deleted_count=deleted.deleted_count,
        inserted_count=inserted_count,
    )


def require_owner_id(config: Settings) -> str:
    if not config.SEED_OWNER_ID:
        raise ConfigurationError(
            "SEED_OWNER_ID is not set. Set it in the environment or .env file."
        )
    return config.SEED_OWNER_ID


async def run_seed(
    config: Optional[Settings] = None,
    records: Optional[list[dict]] = None,
) -> SeedResult:
    """Connect, reset the listings collection to the sample dataset, disconnect.

    Configuration and dataset problems are raised before connecting, and a
    failed connection is raised before anything is deleted.
    """
    config = config or settings
    owner_id = require_owner_id(config)
    if records is None:
        records = load_dataset(config.SEED_FILE)

    client = await open_client(config)
    try:
        collection = client[config.DATABASE_NAME][config.LISTINGS_COLLECTION]
        result = await reset_collection(collection, records, owner_id)
    finally:
        client.close()

    logger.info(
        "Seeded %d listings into '%s.%s' (removed %d)",
        result.inserted_count,
        result.database,
        result.collection,
        result.deleted_count,
    )
    return result


async def seed_status(collection: AsyncIOMotorCollection, owner_id: Optional[str]) -> SeedStatus:
    try:
        total = await collection.count_documents({})
        owned = 0
        if owner_id:
            owned = await collection.count_documents({"owner": owner_value(owner_id)})
    except ConnectionFailure as exc:
        raise SeedConnectionError(f"Lost connection to MongoDB: {exc}") from exc
    except PyMongoError as exc:
        raise StoreError(f"Failed to count '{collection.name}': {exc}") from exc
    return SeedStatus(collection=collection.name, total=total, owned_by_seed_owner=owned)

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException

from wanderlust.config import settings
from wanderlust.database import get_database
from wanderlust.dependencies import verify_api_key
from wanderlust.seeding.dataset import load_dataset
from wanderlust.seeding.errors import (
    ConfigurationError,
    DatasetError,
    SeedConnectionError,
    SeedError,
    StoreError,
)
from wanderlust.seeding.models import SeedResult, SeedStatus
from wanderlust.seeding.service import require_owner_id, reset_collection, seed_status

logger = logging.getLogger(__name__)

# All routes under /api/seed require a valid API key in the X-API-Key header.
router = APIRouter(prefix="/api/seed", tags=["seed"], dependencies=[Depends(verify_api_key)])

_STATUS_CODES = {
    ConfigurationError: 500,
    DatasetError: 500,
    SeedConnectionError: 503,
    StoreError: 502,
}


def _to_http_error(exc: SeedError) -> HTTPException:
    status_code = next(
        (code for cls, code in _STATUS_CODES.items() if isinstance(exc, cls)),
        500,
    )
    return HTTPException(status_code=status_code, detail=str(exc))


@router.post("", response_model=SeedResult)
async def seed():
    """Reset the listings collection to the sample dataset.

    Destructive: every existing listing is deleted first. Uses the app's
    database connection, so the collection is whatever the running API
    is pointed at.
    """
    try:
        owner_id = require_owner_id(settings)
        records = await asyncio.to_thread(load_dataset, settings.SEED_FILE)
        collection = get_database()[settings.LISTINGS_COLLECTION]
        result = await reset_collection(collection, records, owner_id)
    except SeedError as exc:
        logger.error("Seed via API failed: %s", exc)
        raise _to_http_error(exc) from exc

    logger.info(
        "Seeded %d listings into '%s.%s' via API",
        result.inserted_count,
        result.database,
        result.collection,
    )
    return result


@router.get("/status", response_model=SeedStatus)
async def status():
    """Count listings, and how many belong to the configured seed owner."""
    collection = get_database()[settings.LISTINGS_COLLECTION]
    try:
        return await seed_status(collection, settings.SEED_OWNER_ID)
    except SeedError as exc:
        logger.error("Seed status via API failed: %s", exc)
        raise _to_http_error(exc) from exc

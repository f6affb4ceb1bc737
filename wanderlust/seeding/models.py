from pydantic import BaseModel


class SeedResult(BaseModel):
    """Outcome of a successful seed run.

    Returned by the seeder and by POST /api/seed.
    """

    database: str  # Target database name, e.g. "wanderlust"
    collection: str  # Target collection name, e.g. "listings"
    owner_id: str  # Identifier stamped onto every seeded record
    deleted_count: int  # Records removed by the clear step
    inserted_count: int  # Records written by the batch insert


class SeedStatus(BaseModel):
    """Current state of the seeded collection."""

    collection: str
    total: int  # All records in the collection
    owned_by_seed_owner: int  # Records whose owner is the configured seed owner

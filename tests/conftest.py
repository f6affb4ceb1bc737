from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from wanderlust.config import settings
from wanderlust.main import app


class FakeCollection:
    """In-memory stand-in for a motor collection.

    Supports the calls the seeder makes, with the same result shapes, so
    end-state properties can be checked without a server.
    """

    def __init__(self, docs=None, name="listings", database="wanderlust"):
        self.name = name
        self.database = SimpleNamespace(name=database)
        self.docs = [dict(d) for d in docs or []]
        self.calls = []

    async def delete_many(self, filter):
        self.calls.append("delete_many")
        removed = len(self.docs)
        self.docs = []
        return SimpleNamespace(deleted_count=removed)

    async def insert_many(self, documents, ordered=True):
        self.calls.append("insert_many")
        for doc in documents:
            doc.setdefault("_id", ObjectId())
            self.docs.append(doc)
        return SimpleNamespace(inserted_ids=[doc["_id"] for doc in documents])

    async def count_documents(self, filter):
        return sum(1 for d in self.docs if all(d.get(k) == v for k, v in filter.items()))

    def contents(self):
        """Stored records without store-assigned ids."""
        return [{k: v for k, v in d.items() if k != "_id"} for d in self.docs]


@pytest.fixture
def api_key():
    return settings.API_KEY


@pytest.fixture
def sample_listings():
    return [
        {
            "title": "Cozy Beachfront Cottage",
            "description": "Charming cottage with ocean views.",
            "image": {"filename": "listingimage", "url": "https://example.com/cottage.jpg"},
            "price": 1500,
            "location": "Malibu",
            "country": "United States",
        },
        {
            "title": "Modern Loft in Downtown",
            "description": "Stylish loft in the heart of the city.",
            "image": {"filename": "listingimage", "url": "https://example.com/loft.jpg"},
            "price": 1200,
            "location": "New York City",
            "country": "United States",
            "owner": "someone-else",
        },
    ]


@pytest.fixture
def fake_collection():
    return FakeCollection(docs=[{"title": "Stale listing", "owner": "old-owner"}])


def _make_mock_db(collection):
    mock_db = MagicMock()
    mock_db.__getitem__.return_value = collection
    return mock_db


@pytest.fixture
async def client(api_key, fake_collection):
    mock_db = _make_mock_db(fake_collection)

    with patch("wanderlust.seeding.router.get_database", return_value=mock_db):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            ac.headers["X-API-Key"] = api_key
            yield ac

import logging
from unittest.mock import AsyncMock, patch

from scripts import seed_db
from wanderlust.seeding.errors import SeedConnectionError, StoreError
from wanderlust.seeding.models import SeedResult


def _result():
    return SeedResult(
        database="wanderlust",
        collection="listings",
        owner_id="O1",
        deleted_count=3,
        inserted_count=10,
    )


def test_main_returns_zero_on_success():
    with patch.object(seed_db, "setup_logging"), patch.object(
        seed_db, "run_seed", AsyncMock(return_value=_result())
    ) as run:
        assert seed_db.main() == 0
    run.assert_awaited_once_with()


def test_main_returns_one_on_connection_error(caplog):
    failing = AsyncMock(side_effect=SeedConnectionError("Could not reach MongoDB"))
    with patch.object(seed_db, "setup_logging"), patch.object(seed_db, "run_seed", failing):
        with caplog.at_level(logging.ERROR):
            assert seed_db.main() == 1
    assert "Could not reach MongoDB" in caplog.text


def test_main_returns_one_on_store_error():
    failing = AsyncMock(side_effect=StoreError("Batch insert into 'listings' failed", inserted_count=2))
    with patch.object(seed_db, "setup_logging"), patch.object(seed_db, "run_seed", failing):
        assert seed_db.main() == 1

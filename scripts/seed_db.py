"""Reset the listings collection to the sample data in data/listings.json.

Replaces all existing listings and stamps SEED_OWNER_ID onto every one, so
it is safe to re-run. Connection settings come from the environment or .env.

Usage: python -m scripts.seed_db
"""

import asyncio
import logging
import sys

from wanderlust.logging_config import setup_logging
from wanderlust.seeding.errors import SeedError
from wanderlust.seeding.service import run_seed

logger = logging.getLogger("wanderlust.seed")


def main() -> int:
    setup_logging()
    try:
        asyncio.run(run_seed())
    except SeedError as exc:
        logger.error("Seeding failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Seed script - loads the bundled fixtures into the configured storage medium.

Usage:
    python -m scripts.seed            # seed collections that are still empty
    python -m scripts.seed --reset    # overwrite every collection with fixtures

Storage medium, fixtures directory and persistent collections come from
the same environment variables the API reads (STORAGE_BACKEND,
STORAGE_DIR, REDIS_URL, FIXTURES_DIR, PERSISTENT_COLLECTIONS).

Without --reset this script is IDEMPOTENT - collections that already
exist in the medium are left untouched.
"""
import argparse
import asyncio
import os
import sys

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from placement_portal.core.config import settings
from placement_portal.core.logging import get_logger, setup_logging
from placement_portal.core.store import COLLECTIONS, PortalStore

logger = get_logger("scripts.seed")


async def seed(reset: bool = False) -> dict:
    """Seed every collection; returns record counts per collection."""
    # Every collection goes to the durable medium so the seed outlives this process
    config = settings.model_copy(update={"persistent_collections": list(COLLECTIONS)})
    store = PortalStore.from_settings(config)
    try:
        if reset:
            await store.reset()
        else:
            await store.initialize()

        counts = {}
        for name in COLLECTIONS:
            counts[name] = len(await store.collection(name).read())
        return counts
    finally:
        await store.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the placement portal store")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="overwrite existing collections with the fixture data",
    )
    args = parser.parse_args()

    setup_logging()
    counts = asyncio.run(seed(reset=args.reset))
    logger.info(
        "seed_complete",
        backend=settings.storage_backend,
        reset=args.reset,
        **counts,
    )


if __name__ == "__main__":
    main()

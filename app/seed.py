"""Load the bundled seed catalog into the persistent store."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from .config import Settings, get_settings
from .database import Database
from .models import SeedRecord
from .seed_catalog import SEED_CATALOG
from .services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


async def seed_store(
    store: CatalogStore, records: Sequence[SeedRecord] = SEED_CATALOG
) -> int:
    """Replace every stored document with ``records`` and return the count."""

    # Insert oldest-first so the newest-first listing keeps the seed order.
    count = await store.replace_all(reversed(records))
    logger.info("Seeded %s movies", count)
    return count


async def seed_database(config: Settings | None = None) -> int:
    config = config or get_settings()
    if not config.database_url:
        raise RuntimeError("DATABASE_URL must be set to seed the catalog store")
    database = Database(config.database_url)
    try:
        await database.create_all()
        return await seed_store(CatalogStore(database))
    finally:
        await database.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed_database())


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()

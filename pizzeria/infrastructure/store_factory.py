"""Store Factory — picks the CatalogStore backend named by configuration.

Invariants:
    - Exactly one store per process, built by the composition root (lifespan)
    - The returned store is verified: a broken source never reaches a request
"""

import logging

from pizzeria.config import Settings
from pizzeria.core.repository_protocols import CatalogStore
from pizzeria.infrastructure.json_catalog_store import JsonCatalogStore
from pizzeria.infrastructure.sql_catalog_store import SqlCatalogStore

logger = logging.getLogger(__name__)


def build_catalog_store(settings: Settings) -> CatalogStore:
    if settings.catalog_backend == "json":
        return JsonCatalogStore(settings.data_dir)
    return SqlCatalogStore.from_url(settings.database_url)


async def open_catalog_store(settings: Settings) -> CatalogStore:
    """Build and verify the configured store. Raises StoreUnavailableError."""
    store = build_catalog_store(settings)
    try:
        await store.verify()
    except Exception:
        await store.close()
        raise
    logger.info(
        f"Catalog store ready ({store.backend})",
        extra={"backend": store.backend},
    )
    return store

"""Route Dependencies — hands the process-wide store to request handlers.

Invariants:
    - The store lives on app.state, set by the lifespan; never a module global
    - Tests override get_catalog_store via app.dependency_overrides
"""

from fastapi import Depends, Request

from pizzeria.config import Settings, get_settings
from pizzeria.core.repository_protocols import CatalogStore
from pizzeria.services.catalog_service import CatalogService


def get_catalog_store(request: Request) -> CatalogStore:
    store = getattr(request.app.state, "catalog_store", None)
    if store is None:
        raise RuntimeError("Catalog store not initialized")
    return store


def get_catalog_service(
    store: CatalogStore = Depends(get_catalog_store),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    return CatalogService(
        store,
        image_base=settings.image_base_url,
        image_ext=settings.image_extension,
    )

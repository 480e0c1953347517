"""Pizza Routes — catalog, pizza of the day, and raw pizza types.

Invariants:
    - /api/pizzas returns one entry per pizza type, in store order
    - /api/pizza-of-the-day changes once per UTC day; 404 when the catalog is empty
"""

import logging

from fastapi import APIRouter, Depends

from pizzeria.api.dependencies import get_catalog_service
from pizzeria.schemas.catalog import CatalogPizza, PizzaTypeOut
from pizzeria.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["pizzas"])


@router.get("/pizzas", response_model=list[CatalogPizza])
async def get_pizzas(service: CatalogService = Depends(get_catalog_service)):
    """All pizza types with their size -> price maps."""
    return [CatalogPizza.from_domain(e) for e in await service.get_catalog()]


@router.get("/pizza-of-the-day", response_model=CatalogPizza)
async def get_pizza_of_the_day(
    service: CatalogService = Depends(get_catalog_service),
):
    return CatalogPizza.from_domain(await service.get_pizza_of_the_day())


@router.get("/pizza_types", response_model=list[PizzaTypeOut])
async def get_pizza_types(
    service: CatalogService = Depends(get_catalog_service),
):
    return [
        PizzaTypeOut.model_validate(t) for t in await service.list_pizza_types()
    ]

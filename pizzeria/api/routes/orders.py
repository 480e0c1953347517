"""Order Routes — raw orders / order details and the resolved order view.

Invariants:
    - Unknown order id → 404 (ResourceNotFoundError via global handler)
    - Non-integer order id → 400 (request validation)
    - Unresolvable pizza references → 500 REFERENTIAL_GAP, never a partial order
"""

import logging

from fastapi import APIRouter, Depends

from pizzeria.api.dependencies import get_catalog_service
from pizzeria.schemas.catalog import OrderDetailOut, OrderOut, OrderViewOut
from pizzeria.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["orders"])


@router.get("/orders", response_model=list[OrderOut])
async def get_orders(service: CatalogService = Depends(get_catalog_service)):
    return [OrderOut.model_validate(o) for o in await service.list_orders()]


@router.get("/order_details", response_model=list[OrderDetailOut])
async def get_order_details(
    service: CatalogService = Depends(get_catalog_service),
):
    return [
        OrderDetailOut.model_validate(d)
        for d in await service.list_order_details()
    ]


@router.get("/orders/{order_id}", response_model=OrderViewOut)
async def get_order(
    order_id: int, service: CatalogService = Depends(get_catalog_service),
):
    """One order with its line items resolved to pizza name, size and price."""
    return OrderViewOut.from_domain(await service.get_order_view(order_id))

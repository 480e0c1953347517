"""Pizzeria API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PizzeriaError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The catalog store is opened in the lifespan, kept on app.state, and
      closed on shutdown; a store that cannot be opened aborts startup

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - StoreUnavailableError re-raised from the lifespan so uvicorn exits non-zero
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pizzeria.api.error_handlers import register_error_handlers
from pizzeria.api.routes import health, orders, pizzas
from pizzeria.config import get_settings
from pizzeria.core.errors import StoreUnavailableError
from pizzeria.infrastructure.observability import setup_logging
from pizzeria.infrastructure.store_factory import open_catalog_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        store = await open_catalog_store(settings)
    except StoreUnavailableError as e:
        logger.critical(
            f"Cannot start: {e.message}", extra={"error_code": e.code},
        )
        raise
    app.state.catalog_store = store
    logger.info("Pizzeria API started", extra={"backend": store.backend})
    yield
    logger.info("Pizzeria API shutting down")
    await store.close()


app = FastAPI(title="Pizzeria API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(pizzas.router)
app.include_router(orders.router)

# Pizza images: /public/pizzas/<pizza_type_id>.webp
if os.path.isdir(settings.public_dir):
    app.mount(
        "/public", StaticFiles(directory=settings.public_dir), name="public",
    )

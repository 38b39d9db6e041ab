"""
Shop Inventory HTTP service
In-memory item-to-price lookups over plain HTTP, in three variants
"""
from contextlib import asynccontextmanager
from typing import Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
import structlog

from shop.api.api import get_variant_router
from shop.api.responses import TEXT_MEDIA_TYPE
from shop.core.config import settings
from shop.core.exceptions import NotFound
from shop.services.inventory_service import InventoryService

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events"""
    service: InventoryService = app.state.inventory_service
    logger.info(
        "Starting shop inventory service",
        variant=app.state.variant,
        items=len(service),
    )

    yield

    logger.info("Shutting down shop inventory service", variant=app.state.variant)


async def not_found_handler(request: Request, exc: NotFound) -> PlainTextResponse:
    """Translate a failed lookup into a plain-text 404"""
    return PlainTextResponse(
        str(exc),
        status_code=404,
        media_type=TEXT_MEDIA_TYPE,
        headers={"X-Content-Type-Options": "nosniff"},
    )


def create_app(variant: Optional[int] = None, inventory: Optional[Mapping[str, int]] = None) -> FastAPI:
    """
    Build the FastAPI application of one variant

    Args:
        variant: 1 (catch-all), 2 (path switch) or 3 (routed);
            ``settings.VARIANT`` when omitted
        inventory: seed inventory; the configured or per-variant default
            when omitted

    Raises:
        ValueError: unknown variant
        pydantic.ValidationError: invalid seed inventory
    """
    if variant is None:
        variant = settings.VARIANT
    router = get_variant_router(variant)

    if inventory is None:
        inventory = settings.resolved_inventory(variant)

    # Interactive docs would shadow the catch-all routes
    app = FastAPI(
        title=settings.APP_NAME,
        description=f"Inventory service, variant {variant}",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.variant = variant
    app.state.inventory_service = InventoryService(inventory)

    app.add_exception_handler(NotFound, not_found_handler)
    app.include_router(router)
    return app


# FastAPI application instance
app = create_app()

"""
Response writers for the two inventory operations

Every variant answers through these so the wire format stays identical:
listing lines ``"<item>: <price>\n"`` and a price body ``"<price>\n"``,
both as ``text/plain`` (Starlette appends ``charset=utf-8``).
"""
from fastapi import Response
from fastapi.responses import PlainTextResponse, StreamingResponse

from shop.services.inventory_service import InventoryService

TEXT_MEDIA_TYPE = "text/plain"


def list_response(service: InventoryService) -> StreamingResponse:
    return StreamingResponse(service.iter_lines(), media_type=TEXT_MEDIA_TYPE)


def price_response(service: InventoryService, item: str) -> PlainTextResponse:
    """Price body for ``item``; ``ItemNotFoundError`` propagates to the app handler"""
    price = service.get_price(item)
    return PlainTextResponse(f"{price}\n", media_type=TEXT_MEDIA_TYPE)


def empty_response() -> Response:
    """Default answer for a path no handler claims: 200 with no body"""
    return Response(status_code=200)

"""
Variant 2: one handler switching on the request path

A single catch-all route receives every request, whatever its method, and
dispatches on an exact match of the path through ``DISPATCH``. Paths
missing from the table get an empty ``200 OK``.

Endpoints:
- ANY /list: inventory listing
- ANY /price?item=<name>: price of one item, 404 when unknown
"""
from typing import Callable, Dict

from fastapi import APIRouter, Request, Response

from shop.api.deps import get_inventory_service, query_item
from shop.api.responses import empty_response, list_response, price_response
from shop.services.inventory_service import InventoryService

router = APIRouter()


def _list(request: Request, service: InventoryService) -> Response:
    return list_response(service)


def _price(request: Request, service: InventoryService) -> Response:
    return price_response(service, query_item(request))


DISPATCH: Dict[str, Callable[[Request, InventoryService], Response]] = {
    "/list": _list,
    "/price": _price,
}


def dispatch(request: Request) -> Response:
    """
    Exact-match dispatch on the request path

    Status Codes:
        200: listing, price, or an unhandled path (empty body)
        404: ``/price`` for an item missing from the inventory
    """
    handler = DISPATCH.get(request.url.path)
    if handler is None:
        return empty_response()
    return handler(request, get_inventory_service(request))


router.add_route("/{path:path}", dispatch)

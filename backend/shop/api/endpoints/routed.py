"""
Variant 3: one handler registered per path

``/list`` and ``/price`` are separate routes. Any other path falls through
to ``unhandled``, which answers with an empty ``200 OK``. Routes are added
without a method list, so every method reaches them.
"""
from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse, StreamingResponse

from shop.api.deps import get_inventory_service, query_item
from shop.api.responses import empty_response, list_response, price_response

router = APIRouter()


def list_items(request: Request) -> StreamingResponse:
    """
    Inventory listing

    URL Pattern: ANY /list

    Response:
        200, one ``"<item>: <price>"`` line per item, in no particular order
    """
    return list_response(get_inventory_service(request))


def get_price(request: Request) -> PlainTextResponse:
    """
    Price of a single item

    URL Pattern: ANY /price?item=<name>

    Query Parameters:
        item (str): item name, the empty string when absent

    Status Codes:
        200: ``"<price>\\n"``
        404: ``no such item: "<name>"``

    Example:
        GET /price?item=shoes
        → 50
    """
    return price_response(get_inventory_service(request), query_item(request))


def unhandled(request: Request) -> Response:
    return empty_response()


router.add_route("/list", list_items)
router.add_route("/price", get_price)
# Added last so the two routes above take precedence
router.add_route("/{path:path}", unhandled)

"""
Variant 1: a single catch-all handler

There is no routing at all. Whatever the path or method, the request is
answered with the full inventory listing.

URL Pattern: ANY /{anything}
"""
from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from shop.api.deps import get_inventory_service
from shop.api.responses import list_response

router = APIRouter()


def serve_listing(request: Request) -> StreamingResponse:
    """
    Inventory listing for every request

    Response:
        200, one ``"<item>: <price>"`` line per item, in no particular order
    """
    return list_response(get_inventory_service(request))


# Plain routes without a method list accept any method, extension ones included
router.add_route("/{path:path}", serve_listing)

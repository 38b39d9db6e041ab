"""
Request dependencies shared by the endpoint routers
"""
import re
from typing import Optional
from urllib.parse import unquote_to_bytes

from fastapi import Request

from shop.services.inventory_service import InventoryService

# A "%" not followed by two hex digits makes a query pair undecodable
_BAD_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


def get_inventory_service(request: Request) -> InventoryService:
    """Inventory service of the application handling ``request``"""
    return request.app.state.inventory_service


def _unescape(raw: bytes) -> Optional[str]:
    """
    Decode one query component, or ``None`` when it is malformed.

    Bytes that are not valid UTF-8 are kept as surrogate escapes so the
    not-found message can show them as ``\\xHH``.
    """
    if _BAD_ESCAPE.search(raw):
        return None
    return unquote_to_bytes(raw.replace(b"+", b" ")).decode("utf-8", "surrogateescape")


def query_item(request: Request) -> str:
    """
    First ``item`` query parameter, or the empty string when absent.

    Pairs containing ``;`` or a malformed percent escape are skipped
    instead of rejected, so ``/price?item=%zz`` looks up ``""``.
    """
    for pair in request.scope.get("query_string", b"").split(b"&"):
        if not pair or b";" in pair:
            continue
        raw_name, _, raw_value = pair.partition(b"=")
        name = _unescape(raw_name)
        value = _unescape(raw_value)
        if name is None or value is None:
            continue
        if name == "item":
            return value
    return ""

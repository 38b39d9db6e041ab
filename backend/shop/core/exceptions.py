"""
Shop error types

Two kinds of failure exist: the listen socket could not be bound (fatal for
the process) and a price lookup for an unknown item (confined to a single
request and answered with 404).
"""
from typing import Tuple


_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def quote(value: str) -> str:
    """Double-quote ``value``, backslash-escaping quotes and non-printable characters."""
    out = ['"']
    for ch in value:
        if ch in _SHORT_ESCAPES:
            out.append(_SHORT_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif 0xDC80 <= ord(ch) <= 0xDCFF:
            # undecodable byte carried as a surrogate escape
            out.append("\\x%02x" % (ord(ch) - 0xDC00))
        elif ord(ch) < 0x80:
            out.append("\\x%02x" % ord(ch))
        elif ord(ch) < 0x10000:
            out.append("\\u%04x" % ord(ch))
        else:
            out.append("\\U%08x" % ord(ch))
    out.append('"')
    return "".join(out)


class ShopError(Exception):
    """Base class for shop errors"""


class BindFailure(ShopError):
    """The server could not start listening on its address"""

    def __init__(self, address: Tuple[str, int], reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"listen tcp {address[0]}:{address[1]}: {reason}")


class NotFound(ShopError):
    """A requested resource does not exist"""


class ItemNotFoundError(NotFound):
    """Price lookup for an item missing from the inventory"""

    def __init__(self, item: str):
        self.item = item
        super().__init__(f"no such item: {quote(item)}")

"""
HTTP transport for the shop service

The listen socket is bound here rather than inside uvicorn so that a bind
failure surfaces as ``BindFailure`` to the caller instead of uvicorn's own
exit path.
"""
import contextlib
import socket
from typing import Tuple

from fastapi import FastAPI
import structlog
import uvicorn

from shop.core.exceptions import BindFailure

logger = structlog.get_logger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind a TCP socket to ``host:port``, raising ``BindFailure`` on error."""
    address: Tuple[str, int] = (host, port)
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind(address)
    except OSError as exc:
        sock.close()
        raise BindFailure(address, exc.strerror or str(exc)) from exc
    sock.set_inheritable(True)
    return sock


def serve(app: FastAPI, host: str, port: int, log_level: str = "INFO") -> None:
    """Serve ``app`` on ``host:port`` until the process is interrupted."""
    sock = bind_socket(host, port)
    config = uvicorn.Config(app, log_level=log_level.lower(), log_config=None)
    server = uvicorn.Server(config)
    logger.info("Listening", host=host, port=port)
    with contextlib.closing(sock):
        server.run(sockets=[sock])

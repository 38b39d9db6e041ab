"""Shop CLI - run one of the inventory server variants."""

from typing import Optional

import structlog
import typer

from shop.core.config import settings
from shop.core.exceptions import BindFailure
from shop.core.logging import configure_logging
from shop.main import create_app
from shop.server import serve

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="shop-server",
    help="In-memory inventory HTTP server",
    add_completion=False,
)


@app.command()
def main(
    variant: int = typer.Option(settings.VARIANT, min=1, max=3, help="Server variant (1, 2 or 3)"),
    host: Optional[str] = typer.Option(None, help="Host to bind (variant default when omitted)"),
    port: int = typer.Option(settings.PORT, help="Port to bind"),
    log_level: str = typer.Option(settings.LOG_LEVEL, help="Log level"),
    json_logs: bool = typer.Option(settings.JSON_LOGS, help="Render logs as JSON"),
):
    """Serve the inventory until killed; exit 1 if the address cannot be bound."""
    configure_logging(log_level, json_logs)
    bind_host = host or settings.resolved_host(variant)
    application = create_app(variant)
    try:
        serve(application, bind_host, port, log_level)
    except BindFailure as exc:
        logger.error("Failed to start server", error=str(exc))
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover - cli entry point
    app()

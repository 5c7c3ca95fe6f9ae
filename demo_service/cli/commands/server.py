"""Server management commands."""

import click

from demo_service.cli.utils import info, success, warning
from demo_service.core.settings import get_app_settings, get_logging_settings


@click.group(name="server")
def server() -> None:
    """Server management commands."""


@server.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind (default: from settings or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind (default: from settings or 4000)",
)
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload on code changes",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["critical", "error", "warning", "info", "debug", "trace"]),
    help="Uvicorn log level (default: from LOG_LEVEL)",
)
def run(host: str | None, port: int | None, reload: bool, log_level: str | None) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_app_settings()
    host = host or settings.host
    port = port or settings.port
    log_level = log_level or get_logging_settings().level.lower()

    if reload and settings.is_production:
        warning("Auto-reload is not recommended in production")

    info(f"Server will run at: http://{host}:{port}")
    info(f"Environment: {settings.environment}")
    info(f"Auto-reload: {'enabled' if reload else 'disabled'}")

    success("Starting uvicorn...")
    try:
        uvicorn.run(
            "demo_service.app.main:app",
            host=host,
            port=port,
            reload=reload,
            access_log=settings.debug,
            log_level=log_level,
        )
    except KeyboardInterrupt:
        info("\nShutting down server...")

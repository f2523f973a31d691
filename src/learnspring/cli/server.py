"""Server launch and environment information commands."""
from __future__ import annotations

import typer
import uvicorn

from learnspring.cli.base import app, console, create_table
from learnspring.core.logging import setup_logging
from learnspring.core.settings import get_settings


@app.command("run-server")  # type: ignore[misc]
def run_server(
    host: str | None = typer.Option(None, help="Bind address (defaults to LEARNSPRING_HOST)"),
    port: int | None = typer.Option(None, help="Port (defaults to LEARNSPRING_PORT)"),
    reload: bool = typer.Option(False, help="Reload on source changes"),
) -> None:
    """Run the FastAPI server with uvicorn."""
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "learnspring.main:app",
        host=host if host is not None else settings.host,
        port=port if port is not None else settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("info")  # type: ignore[misc]
def info() -> None:
    """Show the effective configuration."""
    settings = get_settings()
    table = create_table("learnspring Settings", ["Key", "Value"])
    table.add_row("environment", settings.environment)
    table.add_row("debug", str(settings.debug))
    table.add_row("log_level", settings.log_level)
    table.add_row("host", settings.host)
    table.add_row("port", str(settings.port))
    console.print(table)

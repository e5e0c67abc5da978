"""Recipe scraper CLI — entry-point for running the API and one-off scrapes.

Usage:
    python cli/main.py --help

Commands:
    serve     → run the HTTP API under uvicorn
    scrape    → scrape one URL and print the JSON response
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from backend.config import configure_logging, settings

app = typer.Typer(
    name="recipe-scraper",
    help="Recipe scraper API CLI.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind (default: $HOST or 0.0.0.0)."),
    port: Optional[int] = typer.Option(None, help="Port to listen on (default: $PORT or 8080)."),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes."),
) -> None:
    """Run the recipe API server."""
    import uvicorn

    configure_logging()
    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"[serve] Server starting on {bind_host}:{bind_port} …")
    uvicorn.run(
        "backend.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


# ---------------------------------------------------------------------------
# One-off scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="Recipe page URL to scrape."),
) -> None:
    """Scrape a recipe URL and print the API's JSON response to stdout."""
    from backend.scraper import scrape_recipe

    configure_logging()
    response = scrape_recipe(url)
    typer.echo(json.dumps(response.to_dict(), ensure_ascii=False, indent=4))
    if response.error:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()

"""Command-line interface for the catalog service."""

import typer
from rich.console import Console
from rich.panel import Panel

from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="catalog-api",
    help="Onion Architecture API - manage the product catalog service",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.command("init-db")
def init_db() -> None:
    """Create all tables in the configured database."""
    database = DbSessionService()
    try:
        DbManageService(database).create_all()
    finally:
        database.dispose()
    console.print(
        Panel.fit(
            f"Tables created in [cyan]{database.engine.url}[/cyan]",
            title="Database initialized",
            border_style="green",
        )
    )


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(
        f"[green]Serving {config.app.title} on http://{bind_host}:{bind_port}[/green]"
    )
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )


if __name__ == "__main__":
    app()

"""``ecobazaar`` command line: secrets, schema setup and the API server."""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console
from rich.rule import Rule

from ecobazaar_config.settings import get_settings

app = typer.Typer(
    name="ecobazaar",
    help="EcoBazaar auth service tools",
    no_args_is_help=True,
)
secrets_app = typer.Typer(name="secrets", help="Generate secrets", no_args_is_help=True)
db_app = typer.Typer(name="db", help="Database schema", no_args_is_help=True)
app.add_typer(secrets_app)
app.add_typer(db_app)

console = Console()

# Bytes of randomness in a generated signing key
JWT_SECRET_BYTES = 64


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Print a new JWT_SECRET_KEY line for the .env file."""
    console.print(Rule("[bold green]EcoBazaar secrets[/bold green]"))
    key = secrets.token_urlsafe(JWT_SECRET_BYTES)
    # soft_wrap keeps the key on one line for copy and paste
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={key}", soft_wrap=True)
    console.print(Rule())
    console.print("[yellow]Store it outside version control.[/yellow]")


@db_app.command("init")
def init_db() -> None:
    """Create any missing tables in the configured database."""
    # Deferred so that `secrets generate` works without database settings
    from ecobazaar.presentation.api.dependencies import create_tables, get_engine

    async def _init() -> None:
        engine = get_engine()
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_init())
    console.print("[green]Database schema is up to date.[/green]")


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Bind address, API_HOST by default"),
    port: int = typer.Option(None, help="Port, API_PORT by default"),
    reload: bool = typer.Option(False, help="Restart on code changes"),
) -> None:
    """Run the HTTP API under uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "ecobazaar.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()

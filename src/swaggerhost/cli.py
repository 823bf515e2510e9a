"""Command line interface for swaggerhost."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from swaggerhost.config import ConfigError, SwaggerConfig, load_config
from swaggerhost.registry import SchemeRegistrationError, SchemeRegistry
from swaggerhost.schemes import SchemeValidationError
from swaggerhost.web.app import create_app
from swaggerhost.web.swagger import SwaggerUI, describe


console = Console()
app = typer.Typer(help="swaggerhost - serve Swagger UI for your API")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load(config_path: Path | None) -> SwaggerConfig:
    if config_path is None:
        return SwaggerConfig()
    try:
        return load_config(config_path)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def serve(
    config_path: Path = typer.Option(None, "--config", "-c", help="JSON configuration file"),
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Start a server hosting the Swagger UI."""
    import uvicorn

    _setup_logging(verbose)
    config = _load(config_path)

    try:
        web_app = create_app(config)
    except (SchemeValidationError, SchemeRegistrationError) as exc:
        console.print(f"[red]Invalid security scheme:[/red] {exc}")
        raise typer.Exit(code=1)

    if config.enabled:
        summary = describe(web_app.state.swagger_ui)
        console.print(
            f"Serving [bold]{summary['name']}[/bold] on http://{host}:{port}{summary['index']}"
        )
    else:
        console.print("[yellow]Swagger UI is disabled in the configuration.[/yellow]")

    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="debug" if verbose else "info",
    )


@app.command()
def check(
    config_path: Path = typer.Option(..., "--config", "-c", help="JSON configuration file"),
) -> None:
    """Validate every configured security scheme."""
    config = _load(config_path)
    ui = SwaggerUI(config)

    if not ui.schemes():
        console.print("[yellow]No security schemes configured.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Status")

    failed = False
    for descriptor in ui.schemes():
        try:
            descriptor.validate_scheme()
        except SchemeValidationError as exc:
            table.add_row(descriptor.name or "-", descriptor.type or "-", f"[red]{exc}[/red]")
            failed = True
            break
        table.add_row(descriptor.name, descriptor.type, "[green]ok[/green]")

    console.print(table)
    if failed:
        raise typer.Exit(code=1)


@app.command()
def schemes(
    config_path: Path = typer.Option(..., "--config", "-c", help="JSON configuration file"),
    swagger2: bool = typer.Option(
        False, "--swagger2", help="Emit Swagger 2.0 securityDefinitions instead of OpenAPI 3"
    ),
) -> None:
    """Print the configured security schemes as they appear in the spec document."""
    config = _load(config_path)
    registry = SchemeRegistry()
    try:
        for descriptor in config.schemes:
            registry.register(descriptor.name, descriptor.validate_scheme())
    except (SchemeValidationError, SchemeRegistrationError) as exc:
        console.print(f"[red]Invalid security scheme:[/red] {exc}")
        raise typer.Exit(code=1)

    document = {"swagger": "2.0"} if swagger2 else {"openapi": "3.1.0"}
    merged = registry.apply(document)
    merged.pop("swagger" if swagger2 else "openapi")
    typer.echo(json.dumps(merged, indent=2))


if __name__ == "__main__":
    app()

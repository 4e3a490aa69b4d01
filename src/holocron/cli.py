#!/usr/bin/env python3
"""
Main CLI entry point for the Holocron API server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn

from holocron import __version__
from holocron.config import settings
from holocron.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="holocron")
def cli() -> None:
    """Holocron CLI - serve the API and inspect its schema and data."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Holocron API server.

    Runs a single worker: the dataset lives in process memory.
    """
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Holocron API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Reloaded processes re-read settings from the environment
    if log_level == "debug":
        os.environ["HOLOCRON_DEBUG"] = "true"
        os.environ["HOLOCRON_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("HOLOCRON_DEBUG", "false")
        os.environ.setdefault("HOLOCRON_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "holocron.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the SDL to this file instead of stdout",
)
def schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from holocron.graphql.schema import schema as graphql_schema

    sdl = graphql_schema.as_str()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


@cli.command()
@click.option(
    "--seed-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML seed file (defaults to the configured seed)",
)
def characters(seed_file: Path | None) -> None:
    """List the seeded characters."""
    from holocron.errors import HolocronError
    from holocron.store import build_store, create_store_from_settings
    from holocron.store.seed_data import load_seed_file

    try:
        store = build_store(load_seed_file(seed_file)) if seed_file else create_store_from_settings()
    except (HolocronError, ValueError) as e:
        click.echo(f"✗ Invalid seed data: {e}", err=True)
        sys.exit(1)

    all_characters = store.list_characters()
    if not all_characters:
        click.echo("No characters found.")
        return

    click.echo(f"Found {len(all_characters)} character(s):")
    for character in all_characters:
        click.echo(f"  {character.id:<10} {character.kind.value:<6} {character.name}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()

"""Common CLI utilities and the main app group."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)
_configured = False


def _load_env_file(env_path: Path | None = None) -> None:
    """Fill unset environment variables from a .env file (default: ./.env)."""
    load_dotenv(env_path or Path.cwd() / ".env", override=False)


_load_env_file()


def configure_logging(*, verbose: bool = False) -> None:
    """Configure logging with Rich handler. Call once at startup."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
            )
        ],
        force=True,
    )

    _configured = True


@click.group(help="Extract the main article content from HTML pages.")
def app() -> None:
    """Entry point for the boilerstrip CLI."""

"""
Command-line interface for the Mood Logger.
"""

import logging
import sqlite3
from collections.abc import Callable
from datetime import datetime
from typing import Any

import typer

from . import __version__
from .feedback import failed_message, inserted_message
from .models import MoodEntry
from .paths import APP_NAME, DataDirError, resolve_dbpath
from .store import MoodStore
from .validation import parse_rfc3339, parse_value, to_timestamp, validate_dbpath

DBPATH_ENVVAR = "MOOD_LOGGER_DBPATH"

logger = logging.getLogger(__name__)

app = typer.Typer(help="Log a mood rating between 0 and 10")


# MARK: - CLI Entry Points


def cli_log_mood() -> None:
    """Entry point for mood CLI command."""
    app(prog_name="mood")


# MARK: - Private Helpers


def _param_parser(func: Callable[[str], Any]) -> Callable[[str], Any]:
    """Wrap a validator so its errors are reported as usage errors."""

    def parse(raw: str) -> Any:
        try:
            return func(raw)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

    return parse


def _version_callback(value: bool) -> None:
    if value:
        print(f"{APP_NAME} {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# MARK: - Commands


@app.command(name="mood")
def log_mood(
    value: str = typer.Argument(
        ..., metavar="VALUE", help="Mood rating from 0 to 10"
    ),
    message: str | None = typer.Option(
        None, "--message", "-m", help="Optional note to store with the rating"
    ),
    moment: datetime | None = typer.Option(
        None,
        "--datetime",
        metavar="RFC3339",
        parser=_param_parser(parse_rfc3339),
        help="When the mood was felt, defaults to now",
    ),
    dbpath: str | None = typer.Option(
        None,
        "--dbpath",
        "-d",
        envvar=DBPATH_ENVVAR,
        metavar="PATH",
        parser=_param_parser(validate_dbpath),
        help="Database file to write to, must end in .db",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Append a mood rating to the mood database."""
    _configure_logging(verbose)

    try:
        rating = parse_value(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="'VALUE'") from e

    try:
        path = resolve_dbpath(dbpath)
    except DataDirError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)

    if moment is None:
        entry = MoodEntry(value=rating, message=message)
    else:
        entry = MoodEntry(
            timestamp=to_timestamp(moment), value=rating, message=message
        )

    try:
        with MoodStore(path) as store:
            store.ensure_schema()
            count = store.insert(entry)
    except sqlite3.Error as e:
        logger.error("Failed to store mood in %s: %s", path, e)
        print(failed_message(e))
        raise typer.Exit(1)

    print(inserted_message(count, entry.value))


if __name__ == "__main__":
    app()

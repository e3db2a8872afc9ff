"""Command line dice roller."""

import logging
import random
from typing import Optional

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from dicepool import __version__
from dicepool.cli.display import (
    display_config_error,
    display_info,
    display_roll,
    display_roll_error,
    err_console,
)
from dicepool.config import get_settings
from dicepool.dice import DiceError, DicePool, face_type

logger = logging.getLogger(__name__)

# Create main app
app = typer.Typer(
    name="dicepool",
    help="Roll dice written in NdM notation",
    add_completion=False,
    no_args_is_help=True,
)


def _configure_logging() -> None:
    """Send log records to stderr through rich, at the configured level."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def roll(
    dice: list[str] = typer.Argument(..., help="The dice to be rolled (e.g. 1d6)"),
    complex_output: bool = typer.Option(
        False, "--complex", "-c", help="Print each cast die instead of the total"
    ),
    face_type_name: Optional[str] = typer.Option(
        None, "--face-type", "-t", help="Face type to roll in (e.g. u8, i64)"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed the random generator for repeatable rolls"
    ),
) -> None:
    """Roll one or more dice expressions.

    Bad expressions are reported on stderr without stopping the others; the
    exit code is 1 if any expression failed.
    """
    try:
        faces = face_type(face_type_name or get_settings().default_face_type)
    except KeyError as e:
        raise typer.BadParameter(e.args[0], param_hint="--face-type") from e

    if seed is not None:
        random.seed(seed)

    failed = 0
    for notation in dice:
        try:
            pool = DicePool.parse(notation, faces)
            rendered = pool.describe() if complex_output else str(pool)
        except DiceError as e:
            logger.debug("Could not roll %r: %s", notation, e)
            display_roll_error(notation, str(e))
            failed += 1
            continue
        display_roll(notation, rendered)

    if failed:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the installed version."""
    display_info(f"dicepool {__version__}")


@app.callback()
def main() -> None:
    """dicepool - roll dice from the command line.

    Use 'dicepool roll 3d6 1d20' to roll, add --complex to see every die.
    """
    try:
        _configure_logging()
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        display_config_error(f"DICEPOOL_{field.upper()}: {error['msg']}")
        raise typer.Exit(2) from e


if __name__ == "__main__":
    app()

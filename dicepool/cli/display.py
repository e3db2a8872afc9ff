"""Rich display helpers for CLI output."""

from rich.console import Console


# Shared console instances; results go to stdout, failures to stderr
console = Console()
err_console = Console(stderr=True)


def display_roll(notation: str, rendered: str) -> None:
    """Display a rolled notation.

    Args:
        notation: The notation as the user typed it.
        rendered: Total or per-die faces.
    """
    # User input is echoed verbatim, never interpreted as markup
    console.print(f"{notation}: {rendered}", markup=False, highlight=False, soft_wrap=True)


def display_roll_error(notation: str, message: str) -> None:
    """Display why a notation could not be rolled.

    Args:
        notation: The notation as the user typed it.
        message: Error message.
    """
    err_console.print(
        f"{notation}: {message}", markup=False, highlight=False, soft_wrap=True
    )


def display_config_error(message: str) -> None:
    """Display why the DICEPOOL_ settings could not be loaded."""
    err_console.print(
        f"invalid configuration: {message}", markup=False, highlight=False, soft_wrap=True
    )


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")

"""One-shot parse-and-roll helpers.

Both helpers parse the notation into a pool (which rolls it) and return the
total. try_quickroll reports bad notation in its result; quickroll raises.
"""

import logging
from typing import Any

from dicepool.dice.errors import DiceError
from dicepool.dice.faces import Rollable
from dicepool.dice.pool import DicePool
from dicepool.dice.types import DiceResult

logger = logging.getLogger(__name__)


def try_quickroll(
    notation: str, face_type: Rollable | str | None = None
) -> DiceResult[Any]:
    """Roll notation and return the total, capturing dice errors.

    Args:
        notation: Dice notation string (e.g., "1d6").
        face_type: Face type instance or name.

    Returns:
        DiceResult with the total, or with the error that stopped the roll.

    Examples:
        >>> result = try_quickroll("1d6")
        >>> result.ok and 1 <= result.value <= 6
        True
        >>> try_quickroll("1x6").ok
        False
    """
    try:
        total = DicePool.parse(notation, face_type).total()
    except DiceError as e:
        logger.debug("Quick-roll of %r failed: %s", notation, e)
        return DiceResult(notation=notation, error=e)
    return DiceResult(notation=notation, value=total)


def quickroll(notation: str, face_type: Rollable | str | None = None) -> Any:
    """Roll notation and return the total.

    Use try_quickroll when the notation comes from users.

    Args:
        notation: Dice notation string (e.g., "1d2").
        face_type: Face type instance or name.

    Returns:
        Total of the rolled dice.

    Raises:
        DiceParseError: If the notation is malformed.
        ZeroFacesError: If the faces are below 1.

    Examples:
        >>> quickroll("1d2", "u8") in (1, 2)
        True
    """
    return DicePool.parse(notation, face_type).total()

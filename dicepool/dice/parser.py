"""Dice notation parser.

Parses the strict NdM notation: a die count, a lowercase 'd', and the
highest face, with no whitespace (e.g., 3d6, 1d20).
"""

import logging
import re

from dicepool.config import get_settings
from dicepool.dice.errors import DiceParseError, ParseErrorKind
from dicepool.dice.faces import Rollable, resolve_face_type
from dicepool.dice.types import DiceNotation

logger = logging.getLogger(__name__)


SEPARATOR = "d"

# Die counts are ASCII digits with an optional plus sign
_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def parse_notation(
    notation: str, face_type: Rollable | str | None = None
) -> DiceNotation:
    """Parse dice notation without rolling anything.

    Args:
        notation: Dice notation string (e.g., "3d6").
        face_type: Face type to parse the faces as. Defaults to the
            configured default face type.

    Returns:
        DiceNotation with the parsed count and faces.

    Raises:
        DiceParseError: If the notation is malformed.
        ZeroFacesError: If the faces are below 1.

    Examples:
        >>> parse_notation("3d6")
        DiceNotation(count=3, faces=6, face_type=IntFaces(name='u32', bits=32, signed=False))
        >>> parse_notation("1d20", "u8").faces
        20
    """
    faces_type = resolve_face_type(face_type)

    count_text, separator, faces_text = notation.partition(SEPARATOR)
    if not separator:
        raise DiceParseError(
            f"missing '{SEPARATOR}' separator in {notation!r}",
            ParseErrorKind.MISSING_SEPARATOR,
            notation,
        )

    if not _COUNT_PATTERN.fullmatch(count_text):
        raise DiceParseError(
            f"malformed die count {count_text!r} in {notation!r}",
            ParseErrorKind.INVALID_COUNT,
            notation,
        )
    count = int(count_text)

    if count < 1:
        raise DiceParseError(
            f"die count must be at least 1, got {count} in {notation!r}",
            ParseErrorKind.INVALID_COUNT,
            notation,
        )

    max_dice = get_settings().max_dice
    if max_dice is not None and count > max_dice:
        raise DiceParseError(
            f"too many dice: {count} (max {max_dice}) in {notation!r}",
            ParseErrorKind.TOO_MANY_DICE,
            notation,
        )

    try:
        faces = faces_type.parse(faces_text)
    except ValueError as e:
        raise DiceParseError(
            f"malformed face value {faces_text!r} in {notation!r}: {e}",
            ParseErrorKind.INVALID_FACE_VALUE,
            notation,
        ) from e

    faces_type.check_faces(faces)

    parsed = DiceNotation(count=count, faces=faces, face_type=faces_type)
    logger.debug("Parsed %r as %s (%s)", notation, parsed, faces_type.name)
    return parsed

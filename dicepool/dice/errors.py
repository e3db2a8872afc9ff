"""Dice exception definitions.

Custom exception hierarchy for parsing, building and totaling dice.
"""

from enum import Enum


class DiceError(Exception):
    """Base exception for dice operations."""

    pass


class ParseErrorKind(str, Enum):
    """Why a dice notation string was rejected."""

    MISSING_SEPARATOR = "missing_separator"
    INVALID_COUNT = "invalid_count"
    INVALID_FACE_VALUE = "invalid_face_value"
    TOO_MANY_DICE = "too_many_dice"


class DiceParseError(DiceError, ValueError):
    """Error parsing dice notation.

    Attributes:
        kind: Which part of the notation was rejected.
        notation: The offending notation string.
    """

    def __init__(self, message: str, kind: ParseErrorKind, notation: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.notation = notation


class ZeroFacesError(DiceError, ValueError):
    """A die was given a maximum face that cannot be rolled.

    Attributes:
        faces: The rejected maximum.
    """

    def __init__(self, faces: object) -> None:
        super().__init__(f"a die needs at least one face, got {faces!r}")
        self.faces = faces


class MixedFaceTypeError(DiceError, TypeError):
    """Dice with different face types were combined."""

    pass


class DiceTotalOverflowError(DiceError, OverflowError):
    """A total does not fit the face type it is expressed in."""

    pass

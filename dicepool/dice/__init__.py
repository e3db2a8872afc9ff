"""Dice system.

Provides dice, dice pools, NdM notation parsing and quick rolls over any
built-in integer face type or a custom Rollable.

Usage:
    >>> from dicepool.dice import DicePool, quickroll
    >>> coin = quickroll("1d2", "u8")
    >>> pool = DicePool.create(3, 6) + DicePool.parse("2d4")
    >>> total = pool.roll_all().total()
"""

# Errors
from dicepool.dice.errors import (
    DiceError,
    DiceParseError,
    DiceTotalOverflowError,
    MixedFaceTypeError,
    ParseErrorKind,
    ZeroFacesError,
)

# Face types
from dicepool.dice.faces import (
    FACE_TYPES,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    EnumFaces,
    IntFaces,
    Rollable,
    Totalable,
    face_type,
)

# Types
from dicepool.dice.types import DiceNotation, DiceResult

# Dice
from dicepool.dice.die import Die
from dicepool.dice.pool import DicePool

# Parser
from dicepool.dice.parser import parse_notation

# Roller
from dicepool.dice.roller import quickroll, try_quickroll

__all__ = [
    # Errors
    "DiceError",
    "DiceParseError",
    "DiceTotalOverflowError",
    "MixedFaceTypeError",
    "ParseErrorKind",
    "ZeroFacesError",
    # Face types
    "FACE_TYPES",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "EnumFaces",
    "IntFaces",
    "Rollable",
    "Totalable",
    "face_type",
    # Types
    "DiceNotation",
    "DiceResult",
    # Dice
    "Die",
    "DicePool",
    # Parser
    "parse_notation",
    # Roller
    "quickroll",
    "try_quickroll",
]

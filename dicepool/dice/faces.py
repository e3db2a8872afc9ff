"""Face value types for dice.

A face type decides what a die shows: how a random face is produced for a
given maximum, how a face is parsed from and rendered to text, and (for
numeric types) how a handful of faces add up to a total.

Built-in face types cover the fixed-width integer kinds, unsigned and signed.
Any enum can be used through EnumFaces.

Usage:
    >>> from dicepool.dice.faces import U8, face_type
    >>> 1 <= U8.roll(6) <= 6
    True
    >>> face_type("i16").total([3, 4])
    7
"""

import random
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Protocol, runtime_checkable

from dicepool.config import get_settings
from dicepool.dice.errors import DiceTotalOverflowError, ZeroFacesError


# Optional sign followed by ASCII digits; no whitespace, no underscores
_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


@runtime_checkable
class Rollable(Protocol):
    """Protocol for types that can serve as a die's faces.

    Face values must be immutable so a die can hand them out freely.
    """

    @property
    def name(self) -> str:
        """Return the face type identifier (e.g., 'u32')."""
        ...

    def parse(self, text: str) -> Any:
        """Parse a single face literal.

        Raises:
            ValueError: If the text is not a face of this type.
        """
        ...

    def format(self, value: Any) -> str:
        """Render a face value as text."""
        ...

    def check_faces(self, maximum: Any) -> None:
        """Validate a die maximum.

        Raises:
            ZeroFacesError: If the maximum cannot be rolled against.
        """
        ...

    def roll(self, maximum: Any) -> Any:
        """Return a uniformly random face in [1, maximum]."""
        ...


@runtime_checkable
class Totalable(Protocol):
    """Protocol for face types whose values can be summed."""

    def total(self, values: Iterable[Any]) -> Any:
        """Reduce face values to a single total of the same type."""
        ...


@dataclass(frozen=True)
class IntFaces:
    """A fixed-width integer face type.

    Attributes:
        name: Identifier such as 'u8' or 'i64'.
        bits: Width of the integer in bits.
        signed: Whether negative values are representable.
    """

    name: str
    bits: int
    signed: bool = False

    @property
    def min_value(self) -> int:
        """Smallest representable value."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def fits(self, value: int) -> bool:
        """Check if a value is representable in this width."""
        return self.min_value <= value <= self.max_value

    def parse(self, text: str) -> int:
        if not _INT_LITERAL.fullmatch(text):
            raise ValueError(f"{text!r} is not a {self.name} literal")
        if text.startswith("-") and not self.signed:
            raise ValueError(f"{self.name} cannot be negative: {text!r}")

        value = int(text)
        if not self.fits(value):
            raise ValueError(f"{text!r} does not fit in {self.name}")
        return value

    def format(self, value: int) -> str:
        return str(value)

    def check_faces(self, maximum: int) -> None:
        # bool is an int subclass, but True is not a die
        if not isinstance(maximum, int) or isinstance(maximum, bool):
            raise TypeError(
                f"{self.name} dice need an integer face count, got {maximum!r}"
            )
        if maximum < 1:
            raise ZeroFacesError(maximum)
        if not self.fits(maximum):
            raise ValueError(f"{maximum} faces do not fit in {self.name}")

    def roll(self, maximum: int) -> int:
        """Roll a face in [1, maximum].

        random.randint samples the bounded range directly, so there is no
        modulo bias for maximums that do not divide the type's range.
        """
        if maximum < 1:
            raise ZeroFacesError(maximum)
        return random.randint(1, maximum)

    def total(self, values: Iterable[int]) -> int:
        """Sum face values, refusing totals the width cannot hold.

        Raises:
            DiceTotalOverflowError: If the sum falls outside this width.
        """
        result = sum(values)
        if not self.fits(result):
            raise DiceTotalOverflowError(
                f"total {result} overflows {self.name} "
                f"(range {self.min_value}..{self.max_value})"
            )
        return result

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EnumFaces:
    """Faces drawn from the members of an Enum.

    Members count in declaration order, so the first member is face 1.
    Rolling against a member picks uniformly among all members up to and
    including it. Enum faces have no total.

    Example:
        >>> class Coin(Enum):
        ...     HEADS = "heads"
        ...     TAILS = "tails"
        >>> coin = EnumFaces(Coin)
        >>> coin.roll(Coin.TAILS) in (Coin.HEADS, Coin.TAILS)
        True
    """

    enum_cls: type[Enum]
    _members: tuple[Enum, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        members = tuple(self.enum_cls)
        if not members:
            raise ValueError(f"{self.enum_cls.__name__} has no members to roll")
        object.__setattr__(self, "_members", members)

    @property
    def name(self) -> str:
        return self.enum_cls.__name__

    def parse(self, text: str) -> Enum:
        try:
            return self.enum_cls[text]
        except KeyError:
            raise ValueError(f"{text!r} is not a {self.name} member") from None

    def format(self, value: Enum) -> str:
        return value.name

    def check_faces(self, maximum: Enum) -> None:
        if not isinstance(maximum, self.enum_cls):
            raise ZeroFacesError(maximum)

    def roll(self, maximum: Enum) -> Enum:
        self.check_faces(maximum)
        position = self._members.index(maximum) + 1
        return self._members[random.randint(1, position) - 1]

    def __str__(self) -> str:
        return self.name


U8 = IntFaces("u8", 8)
U16 = IntFaces("u16", 16)
U32 = IntFaces("u32", 32)
U64 = IntFaces("u64", 64)
U128 = IntFaces("u128", 128)
USIZE = IntFaces("usize", 64)

I8 = IntFaces("i8", 8, signed=True)
I16 = IntFaces("i16", 16, signed=True)
I32 = IntFaces("i32", 32, signed=True)
I64 = IntFaces("i64", 64, signed=True)
I128 = IntFaces("i128", 128, signed=True)
ISIZE = IntFaces("isize", 64, signed=True)

FACE_TYPES: dict[str, IntFaces] = {
    faces.name: faces
    for faces in (U8, U16, U32, U64, U128, USIZE, I8, I16, I32, I64, I128, ISIZE)
}


def face_type(name: str) -> IntFaces:
    """Look up a built-in integer face type by name.

    Args:
        name: Face type identifier, case-insensitive (e.g., 'u32', 'I8').

    Returns:
        The matching IntFaces instance.

    Raises:
        KeyError: If no built-in face type has that name.
    """
    try:
        return FACE_TYPES[name.lower()]
    except KeyError:
        known = ", ".join(FACE_TYPES)
        raise KeyError(f"Unknown face type {name!r} (expected one of: {known})") from None


def resolve_face_type(faces: Rollable | str | None) -> Rollable:
    """Turn a face type argument into a Rollable.

    None means the configured default, a string is looked up by name, and
    anything else is passed through.
    """
    if faces is None:
        return face_type(get_settings().default_face_type)
    if isinstance(faces, str):
        return face_type(faces)
    return faces

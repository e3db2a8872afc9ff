"""Dice system type definitions.

Immutable dataclasses for parsed notation and quick-roll outcomes.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from dicepool.dice.errors import DiceError
from dicepool.dice.faces import Rollable


T = TypeVar("T")


@dataclass(frozen=True)
class DiceNotation:
    """A parsed dice notation like 3d6.

    Attributes:
        count: Number of dice.
        faces: Highest face of each die.
        face_type: Face type the faces were parsed as.
    """

    count: int
    faces: Any
    face_type: Rollable

    def __str__(self) -> str:
        return f"{self.count}d{self.face_type.format(self.faces)}"


@dataclass(frozen=True)
class DiceResult(Generic[T]):
    """Outcome of a quick-roll that did not raise.

    Exactly one of value and error is set.

    Attributes:
        notation: The notation that was rolled.
        value: Total of the roll, if it succeeded.
        error: Why the notation was rejected, if it failed.
    """

    notation: str
    value: T | None = None
    error: DiceError | None = None

    @property
    def ok(self) -> bool:
        """Check if the roll succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the total, re-raising the error if the roll failed."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

"""Dice pools: ordered handfuls of dice sharing one face type.

Usage:
    >>> pool = DicePool.parse("3d6")
    >>> 3 <= pool.roll_all().total() <= 18
    True
    >>> combined = DicePool.create(2, 4) + DicePool.parse("1d20")
    >>> len(combined)
    3
"""

import logging
from typing import Any, Iterable, Iterator

from dicepool.dice.die import Die
from dicepool.dice.errors import MixedFaceTypeError
from dicepool.dice.faces import Rollable, Totalable, resolve_face_type
from dicepool.dice.parser import parse_notation

logger = logging.getLogger(__name__)


class DicePool:
    """An ordered collection of dice with a common face type.

    Dice may have different face counts (a d4 next to a d6) as long as
    they roll in the same face type. Every die in a new pool has already
    been rolled, so the pool can be read right away.

    Attributes:
        face_type: Face type shared by every die.
    """

    def __init__(self, dice: Iterable[Die], face_type: Rollable) -> None:
        """Wrap dice without rolling them.

        Prefer create(), from_dice() or parse().

        Raises:
            MixedFaceTypeError: If a die does not roll in face_type.
        """
        self._face_type = face_type
        self._dice = list(dice)
        for die in self._dice:
            if die.face_type != face_type:
                raise MixedFaceTypeError(
                    f"a {die.face_type.name} die cannot join a {face_type.name} pool"
                )

    @classmethod
    def create(
        cls, count: int, faces: Any, face_type: Rollable | str | None = None
    ) -> "DicePool":
        """Create count freshly rolled dice with the same faces.

        Args:
            count: Number of dice. Zero gives an empty pool.
            faces: Highest face of each die.
            face_type: Face type instance or name.

        Raises:
            ValueError: If count is negative.
            ZeroFacesError: If faces is below 1.
        """
        if count < 0:
            raise ValueError(f"die count cannot be negative, got {count}")
        resolved = resolve_face_type(face_type)
        resolved.check_faces(faces)

        logger.debug(
            "Creating pool of %d dice with %s %s faces",
            count,
            resolved.format(faces),
            resolved.name,
        )
        return cls((Die(faces, resolved) for _ in range(count)), resolved)

    @classmethod
    def from_dice(
        cls, dice: Iterable[Die], face_type: Rollable | str | None = None
    ) -> "DicePool":
        """Wrap already built dice, keeping their current faces.

        Args:
            dice: Dice to take, in order.
            face_type: Face type of the pool. Defaults to the face type of
                the first die, or the configured default when dice is empty.

        Raises:
            MixedFaceTypeError: If the dice do not share one face type.
        """
        dice = list(dice)
        if face_type is None and dice:
            resolved = dice[0].face_type
        else:
            resolved = resolve_face_type(face_type)
        return cls(dice, resolved)

    @classmethod
    def parse(
        cls, notation: str, face_type: Rollable | str | None = None
    ) -> "DicePool":
        """Parse NdM notation into a pool of rolled dice.

        Parsing rolls every die, exactly as create() does.

        Raises:
            DiceParseError: If the notation is malformed.
            ZeroFacesError: If the faces are below 1.
        """
        parsed = parse_notation(notation, face_type)
        return cls.create(parsed.count, parsed.faces, parsed.face_type)

    @property
    def face_type(self) -> Rollable:
        return self._face_type

    @property
    def dice(self) -> tuple[Die, ...]:
        return tuple(self._dice)

    def roll_all(self) -> "DicePool":
        """Roll every die once, in order.

        Returns:
            This pool, for chaining.
        """
        for die in self._dice:
            die.roll()
        logger.debug("Rolled %d dice: %s", len(self._dice), self.describe())
        return self

    def current_faces(self) -> list[Any]:
        """Snapshot of every die's current face, in pool order."""
        return [die.current_face for die in self._dice]

    def total(self) -> Any:
        """Sum of the current faces.

        Raises:
            TypeError: If the face type has no total.
            DiceTotalOverflowError: If the sum does not fit the face type.
        """
        if not isinstance(self._face_type, Totalable):
            raise TypeError(f"{self._face_type.name} faces cannot be totaled")
        return self._face_type.total(self.current_faces())

    def describe(self) -> str:
        """Render each current face, space separated. Empty pools give ''."""
        return " ".join(self._face_type.format(face) for face in self.current_faces())

    def __add__(self, other: object) -> "DicePool":
        """Combine two pools, left dice first.

        The new pool holds copies of both operands' dice in their current
        state; nothing is rolled and the operands are unchanged.
        """
        if not isinstance(other, DicePool):
            return NotImplemented
        if other.face_type != self._face_type:
            raise MixedFaceTypeError(
                f"cannot combine {self._face_type.name} and "
                f"{other.face_type.name} pools"
            )
        dice = [die.copy() for die in self._dice]
        dice.extend(die.copy() for die in other)
        return DicePool(dice, self._face_type)

    def __len__(self) -> int:
        return len(self._dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)

    def __str__(self) -> str:
        return self._face_type.format(self.total())

    def __repr__(self) -> str:
        return f"DicePool({self._dice!r}, face_type={self._face_type.name!r})"

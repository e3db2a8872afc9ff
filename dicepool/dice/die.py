"""A single die."""

from typing import Any

from dicepool.dice.errors import MixedFaceTypeError
from dicepool.dice.faces import Rollable, Totalable, resolve_face_type


class Die:
    """A single die with a fixed number of faces.

    The die is rolled once when it is created, so it always shows a face.

    Attributes:
        faces: Highest face of the die (e.g., 6 for a d6).
        face_type: Face type the die rolls in.
        current_face: The face currently showing.

    Examples:
        >>> d6 = Die(6)
        >>> 1 <= d6.current_face <= 6
        True
        >>> 2 <= Die(4) + d6 <= 10
        True
    """

    __slots__ = ("_faces", "_face_type", "_current")

    def __init__(self, faces: Any, face_type: Rollable | str | None = None) -> None:
        """Create a die and give it an initial roll.

        Args:
            faces: Highest face, in the face type's domain.
            face_type: Face type instance or name. Defaults to the
                configured default face type.

        Raises:
            ZeroFacesError: If faces is below 1.
        """
        self._face_type = resolve_face_type(face_type)
        self._face_type.check_faces(faces)
        self._faces = faces
        self._current = self._face_type.roll(faces)

    @property
    def faces(self) -> Any:
        return self._faces

    @property
    def face_type(self) -> Rollable:
        return self._face_type

    @property
    def current_face(self) -> Any:
        return self._current

    def roll(self) -> Any:
        """Roll the die and return the new face."""
        self._current = self._face_type.roll(self._faces)
        return self._current

    def copy(self) -> "Die":
        """Return an independent die showing the same face, without rolling."""
        twin = Die.__new__(Die)
        twin._face_type = self._face_type
        twin._faces = self._faces
        twin._current = self._current
        return twin

    def __add__(self, other: object) -> Any:
        """Add the current faces of two dice.

        Returns the sum as a face value, not a Die.
        """
        if not isinstance(other, Die):
            return NotImplemented
        if other.face_type != self._face_type:
            raise MixedFaceTypeError(
                f"cannot add {self._face_type.name} and {other.face_type.name} dice"
            )
        if not isinstance(self._face_type, Totalable):
            raise TypeError(f"{self._face_type.name} faces cannot be totaled")
        return self._face_type.total([self._current, other.current_face])

    def __repr__(self) -> str:
        return (
            f"Die(faces={self._face_type.format(self._faces)}, "
            f"current_face={self._face_type.format(self._current)}, "
            f"face_type={self._face_type.name!r})"
        )

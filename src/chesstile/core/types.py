"""Square value type and coordinate helpers.

Squares are addressed by ``(file, rank)`` (column, row), each in
``[0, 8)``.  ``(0, 0)`` is a1, ``(7, 7)`` is h8.  A :class:`Square` may hold
coordinates outside the board (e.g. a pointer past the edge); callers use
:attr:`Square.is_valid` or let the board raise.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    file: int
    rank: int

    @property
    def is_valid(self) -> bool:
        """Whether both coordinates lie on the 8x8 board."""
        return 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE

    def offset(self, df: int, dr: int) -> Square:
        """Square displaced by *df* files and *dr* ranks (may be off-board)."""
        return Square(self.file + df, self.rank + dr)

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Square(4, 3).name == 'e4'``."""
        if not self.is_valid:
            return f"({self.file}, {self.rank})"
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4' → Square(4, 3)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    def __str__(self) -> str:
        return self.name


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)
)

"""Legal-move generation for each piece kind.

Both generators are pure: they read the grid and never mutate it.  Results
come back as a tuple in a fixed order (knight offsets in
:data:`KNIGHT_OFFSETS` order, queen rays in :data:`QUEEN_DIRS` order) so
callers and tests see deterministic output.

The knight never captures: an occupied landing square is dropped.  The queen
captures whatever blocks a ray, without telling allies from enemies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from chesstile.core.enums import PieceKind
from chesstile.core.errors import OutOfBoundsError
from chesstile.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chesstile.core.board import BoardGrid

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (-1, 2),
    (-2, 1),
    (-1, -2),
    (-2, -1),
    (1, -2),
    (2, -1),
)

# E, W, N, S, NE, SW, NW, SE
QUEEN_DIRS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves = (sq.offset(df, dr) for df, dr in offsets)
        targets[sq] = tuple(to_sq for to_sq in moves if to_sq.is_valid)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            step = sq.offset(df, dr)
            while step.is_valid:
                ray.append(step)
                step = step.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Generators ---------------------------------------------------------------


def _check_origin(origin: Square) -> None:
    if not origin.is_valid:
        raise OutOfBoundsError(origin)


def knight_moves(origin: Square, grid: BoardGrid) -> tuple[Square, ...]:
    """L-shaped jumps onto empty squares."""
    _check_origin(origin)
    return tuple(sq for sq in _KNIGHT_TARGETS[origin] if not grid.is_occupied(sq))


def queen_moves(origin: Square, grid: BoardGrid) -> tuple[Square, ...]:
    """Sliding moves along the eight rays, stopping on (and including) a blocker."""
    _check_origin(origin)
    moves: list[Square] = []
    for ray in _QUEEN_RAYS[origin]:
        for to_sq in ray:
            moves.append(to_sq)
            if grid.is_occupied(to_sq):
                break
    return tuple(moves)


MoveGenerator = Callable[[Square, "BoardGrid"], tuple[Square, ...]]

_GENERATORS: dict[PieceKind, MoveGenerator] = {
    PieceKind.KNIGHT: knight_moves,
    PieceKind.QUEEN: queen_moves,
}


def legal_moves(kind: PieceKind, origin: Square, grid: BoardGrid) -> tuple[Square, ...]:
    """Destination squares a piece of *kind* standing on *origin* may reach.

    An empty result is a valid outcome (the piece is boxed in), not an error.
    """
    try:
        generator = _GENERATORS[kind]
    except KeyError:
        raise ValueError(f"No move rules for piece kind: {kind!r}") from None

    moves = generator(origin, grid)
    if not moves:
        _LOGGER.debug("No legal moves for %s on %s", kind, origin)
    return moves

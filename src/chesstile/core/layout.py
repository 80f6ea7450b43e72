"""Random starting layout."""

from __future__ import annotations

import random
from collections.abc import Sequence

from chesstile.core.enums import PieceKind
from chesstile.core.types import ALL_SQUARES, Square

DEFAULT_KINDS: tuple[PieceKind, ...] = (PieceKind.KNIGHT, PieceKind.QUEEN)

Layout = tuple[tuple[PieceKind, Square], ...]


def initial_layout(
    kinds: Sequence[PieceKind] = DEFAULT_KINDS,
    rng: random.Random | None = None,
) -> Layout:
    """Assign each of *kinds* a distinct, uniformly random square.

    Pass a seeded *rng* for a reproducible layout.
    """
    if len(kinds) > len(ALL_SQUARES):
        raise ValueError(f"Cannot place {len(kinds)} pieces on {len(ALL_SQUARES)} squares")
    rng = rng if rng is not None else random.Random()
    squares = rng.sample(ALL_SQUARES, len(kinds))
    return tuple(zip(kinds, squares))

"""Connected-region analysis over a 64-cell grid."""

from __future__ import annotations

from collections.abc import Sequence

from loa.core.enums import Piece
from loa.core.types import SQUARES


def region_sizes(cells: Sequence[Piece]) -> dict[Piece, list[int]]:
    """Sizes of the 8-connected clusters of each side, largest first.

    *cells* is indexed by ``Square.index``. A side without pieces maps to an
    empty list.
    """
    sizes: dict[Piece, list[int]] = {Piece.WHITE: [], Piece.BLACK: []}
    visited = [False] * len(cells)

    for start, piece in enumerate(cells):
        if visited[start] or piece == Piece.EMPTY:
            continue
        visited[start] = True
        stack = [start]
        size = 0
        while stack:
            index = stack.pop()
            size += 1
            for neighbour in SQUARES[index].adjacent():
                n = neighbour.index
                if not visited[n] and cells[n] == piece:
                    visited[n] = True
                    stack.append(n)
        sizes[piece].append(size)

    for side_sizes in sizes.values():
        side_sizes.sort(reverse=True)
    return sizes

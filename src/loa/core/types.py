"""Square value type, directions and coordinate helpers.

Board layout (row-major, rank 1 at the bottom):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

BOARD_SIZE = 8


class Direction(IntEnum):
    """The eight compass directions a piece can travel in."""

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7

    @property
    def delta(self) -> tuple[int, int]:
        """(column delta, row delta) of a single step."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return Direction((self.value + 4) % 8)


_DELTAS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate.

    Use :func:`make_square` (or ``SQUARES[index]``) to get the canonical
    instance; squares compare by value either way.
    """

    col: int
    row: int

    def __post_init__(self) -> None:
        if not (0 <= self.col < BOARD_SIZE and 0 <= self.row < BOARD_SIZE):
            raise ValueError(f"Square off board: ({self.col}, {self.row})")

    @property
    def index(self) -> int:
        return self.row * BOARD_SIZE + self.col

    @property
    def name(self) -> str:
        """Human-readable name, e.g. (5, 2) -> 'f3'."""
        return chr(ord("a") + self.col) + str(self.row + 1)

    def adjacent(self) -> tuple[Square, ...]:
        """On-board squares touching this one (edge or corner)."""
        return _ADJACENT[self.index]

    def ray(self, direction: Direction) -> tuple[Square, ...]:
        """Squares from here to the board edge in *direction*, nearest first."""
        return _RAYS[self.index][direction]

    def move_dest(self, direction: Direction, steps: int) -> Square | None:
        """Square *steps* away in *direction*, or None if that is off board."""
        if steps == 0:
            return self
        ray = _RAYS[self.index][direction]
        if steps < 0 or steps > len(ray):
            return None
        return ray[steps - 1]

    def direction_to(self, other: Square) -> Direction | None:
        """Direction of the line from here to *other*, None if not on a line."""
        dc = other.col - self.col
        dr = other.row - self.row
        if dc == 0 and dr == 0:
            return None
        if dc != 0 and dr != 0 and abs(dc) != abs(dr):
            return None
        return Direction(_DELTAS.index((_sign(dc), _sign(dr))))

    def distance_to(self, other: Square) -> int:
        """Chebyshev distance."""
        return max(abs(other.col - self.col), abs(other.row - self.row))

    def __str__(self) -> str:
        return self.name


SQUARES: tuple[Square, ...] = tuple(
    Square(index % BOARD_SIZE, index // BOARD_SIZE)
    for index in range(BOARD_SIZE * BOARD_SIZE)
)


def make_square(col: int, row: int) -> Square:
    """Canonical square for column (0-7) and row (0-7)."""
    if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"Square off board: ({col}, {row})")
    return SQUARES[row * BOARD_SIZE + col]


def square_name(sq: Square) -> str:
    return sq.name


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'f3' -> Square(5, 2)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dc, dr in _DELTAS:
            c = sq.col + dc
            r = sq.row + dr
            ray: list[Square] = []
            while 0 <= c < BOARD_SIZE and 0 <= r < BOARD_SIZE:
                ray.append(SQUARES[r * BOARD_SIZE + c])
                c += dc
                r += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_RAYS = _build_rays()
_ADJACENT: tuple[tuple[Square, ...], ...] = tuple(
    tuple(ray[0] for ray in _RAYS[sq.index] if ray) for sq in SQUARES
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[56:64]

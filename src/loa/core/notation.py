"""Text formats: board layouts and move strings."""

from __future__ import annotations

from collections.abc import Sequence

from loa.core.board import Board
from loa.core.enums import Piece
from loa.core.move import Move
from loa.core.types import BOARD_SIZE


def parse_layout(text: str | Sequence[str]) -> list[list[Piece]]:
    """Parse a layout written top rank first, e.g. ``"- b b b b b b -"``.

    Accepts a multi-line string or a sequence of row strings. Cells are
    ``w``, ``b`` or ``-``, optionally separated by whitespace. Returns rows
    bottom-first, ready for :class:`Board`.
    """
    lines = text.splitlines() if isinstance(text, str) else list(text)
    rows = ["".join(line.split()) for line in lines if line.strip()]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid layout (must contain 8 rows): {text!r}")

    contents: list[list[Piece]] = []
    for row in rows:
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Invalid layout row width: {row!r}")
        contents.append([Piece.from_abbrev(ch) for ch in row])
    contents.reverse()
    return contents


def board_from_text(text: str | Sequence[str], turn: Piece = Piece.BLACK) -> Board:
    """Build a :class:`Board` from a top-rank-first text layout."""
    return Board(parse_layout(text), turn)


def layout_to_text(board: Board) -> str:
    """Inverse of :func:`parse_layout` (top rank first, space separated)."""
    lines = str(board).splitlines()[1:-2]
    return "\n".join(line.strip() for line in lines)


def parse_move(text: str) -> Move:
    """Parse 'f3-d5' style move text."""
    return Move.parse(text)


def move_to_text(move: Move) -> str:
    return str(move)

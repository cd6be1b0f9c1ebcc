"""Core enumerations for the Lines of Action domain."""

from __future__ import annotations

from enum import IntEnum

from loa.core.errors import InvariantViolation


class Piece(IntEnum):
    """Contents of a cell: a white (light) piece, a black (dark) piece, or nothing.

    Also used for sides and for the winner, where EMPTY means a tie.
    """

    EMPTY = 0
    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> Piece:
        if self is Piece.EMPTY:
            raise InvariantViolation("EMPTY has no opposite")
        return Piece.BLACK if self is Piece.WHITE else Piece.WHITE

    @property
    def abbrev(self) -> str:
        """One-character form used in board dumps."""
        return _ABBREVS[self]

    @property
    def full_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_abbrev(cls, char: str) -> Piece:
        """Parse a board-dump character, e.g. 'w' -> WHITE."""
        for piece, abbrev in _ABBREVS.items():
            if abbrev == char.lower():
                return piece
        raise ValueError(f"Invalid piece character: {char!r}")

    def __str__(self) -> str:
        return self.full_name


_ABBREVS: dict[Piece, str] = {
    Piece.EMPTY: "-",
    Piece.WHITE: "w",
    Piece.BLACK: "b",
}


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def from_winner(cls, winner: Piece | None) -> GameResult:
        """Map a board winner (None, a side, or EMPTY for a tie) to a result."""
        if winner is None:
            return cls.IN_PROGRESS
        if winner is Piece.WHITE:
            return cls.WHITE_WINS
        if winner is Piece.BLACK:
            return cls.BLACK_WINS
        return cls.DRAW

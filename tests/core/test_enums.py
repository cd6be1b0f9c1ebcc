"""Tests for Piece and GameResult."""

import pytest

from loa.core.enums import GameResult, Piece
from loa.core.errors import InvariantViolation


class TestPiece:
    def test_opposite(self) -> None:
        assert Piece.WHITE.opposite == Piece.BLACK
        assert Piece.BLACK.opposite == Piece.WHITE

    def test_empty_has_no_opposite(self) -> None:
        with pytest.raises(InvariantViolation):
            Piece.EMPTY.opposite

    def test_abbrev_round_trip(self) -> None:
        for piece in Piece:
            assert Piece.from_abbrev(piece.abbrev) == piece
        assert Piece.from_abbrev("B") == Piece.BLACK

    def test_unknown_abbrev(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_abbrev("x")

    def test_names(self) -> None:
        assert Piece.WHITE.full_name == "white"
        assert str(Piece.BLACK) == "black"


class TestGameResult:
    def test_from_winner(self) -> None:
        assert GameResult.from_winner(None) == GameResult.IN_PROGRESS
        assert GameResult.from_winner(Piece.WHITE) == GameResult.WHITE_WINS
        assert GameResult.from_winner(Piece.BLACK) == GameResult.BLACK_WINS
        assert GameResult.from_winner(Piece.EMPTY) == GameResult.DRAW

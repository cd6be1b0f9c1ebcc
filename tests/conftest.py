"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from loa.core.board import Board
from loa.core.enums import Piece
from loa.core.notation import board_from_text

# Layouts are written top rank (8) first, like the board dump.

# A "general" middle-game position.
BOARD1_TEXT = """
- b b b - b b -
- - - - - - - -
w - - - b - - w
w - w w - w - -
w - b - - w - -
w - - - b b - w
w - - - - - - w
- b - b b - - -
"""

# Black, but not white, pieces are contiguous.
BOARD2_TEXT = """
- - - b - - - -
- w w b - - - -
- - b b w w - w
- w b w w - - -
- b w b b b - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
"""

# Both sides are contiguous.
BOARD3_TEXT = """
- - - - - - - -
- w w w - - - -
- - b b w w w -
- w b w w - - -
- b w b w - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
"""

# Black joins up with b1-b2 or c3-c2; white joins up with h5-h7 or h8-h6.
ONE_MOVE_WIN_TEXT = """
- - - - - - - w
- - - - - - - -
- - - - - - - -
- - - - - - - w
- - - - - - - -
- - b - - - - -
- - - - - - - -
b b - - - - - -
"""


@pytest.fixture
def board1() -> Board:
    return board_from_text(BOARD1_TEXT, Piece.BLACK)


@pytest.fixture
def board2() -> Board:
    return board_from_text(BOARD2_TEXT, Piece.BLACK)


@pytest.fixture
def board3() -> Board:
    return board_from_text(BOARD3_TEXT, Piece.BLACK)


@pytest.fixture
def one_move_win() -> Board:
    return board_from_text(ONE_MOVE_WIN_TEXT, Piece.BLACK)


@pytest.fixture
def one_move_win_white() -> Board:
    return board_from_text(ONE_MOVE_WIN_TEXT, Piece.WHITE)


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton Qt application for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app

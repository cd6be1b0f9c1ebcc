"""Core domain layer - pure Lines of Action logic with zero external dependencies.

Quick start::

    from loa.core import Board, Move

    board = Board()
    for move in board.legal_moves():
        print(move)
    board.make_move(Move.parse("b1-b3"))
"""

from loa.core.board import DEFAULT_MOVE_LIMIT, INITIAL_PIECES, Board
from loa.core.enums import GameResult, Piece
from loa.core.errors import InvariantViolation
from loa.core.move import Move
from loa.core.notation import (
    board_from_text,
    layout_to_text,
    move_to_text,
    parse_layout,
    parse_move,
)
from loa.core.regions import region_sizes
from loa.core.types import (
    BOARD_SIZE,
    SQUARES,
    Direction,
    Square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Direction",
    "GameResult",
    "Piece",
    # Types / helpers
    "BOARD_SIZE",
    "SQUARES",
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "DEFAULT_MOVE_LIMIT",
    "INITIAL_PIECES",
    "InvariantViolation",
    "Move",
    "region_sizes",
    # Notation
    "board_from_text",
    "layout_to_text",
    "move_to_text",
    "parse_layout",
    "parse_move",
]

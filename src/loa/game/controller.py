"""GameController - drives a Lines of Action match between two players.

Owns the authoritative Board: asks the side to move for move text, applies
it, and reports moves and the outcome through simple callbacks so a UI or
tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from loa.core.board import Board
from loa.core.enums import GameResult, Piece
from loa.core.errors import InvariantViolation
from loa.core.move import Move
from loa.game.player import Player

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Board], None]  # applied move, board after it
RejectCallback = Callable[[str, str], None]  # offending text, reason
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Turn-taking driver for one match.

    Args:
        white: Player for the white (light) pieces.
        black: Player for the black (dark) pieces.
        board: Starting position; copied. Defaults to the standard opening.
        move_limit: Moves per side before the game is tied.
    """

    __slots__ = ("_board", "_players", "_over_reported", "events")

    def __init__(
        self,
        white: Player,
        black: Player,
        board: Board | None = None,
        move_limit: int | None = None,
    ) -> None:
        if white.side != Piece.WHITE or black.side != Piece.BLACK:
            raise ValueError("Players must be given as (white, black)")
        self._players = {Piece.WHITE: white, Piece.BLACK: black}
        self._board = board.copy() if board is not None else Board()
        if move_limit is not None:
            self._board.set_move_limit(move_limit)
        self._over_reported = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def result(self) -> GameResult:
        return GameResult.from_winner(self._board.winner)

    @property
    def current_player(self) -> Player:
        return self._players[self._board.turn]

    def player(self, side: Piece) -> Player:
        return self._players[side]

    # ── Commands ─────────────────────────────────────────────────────────

    def submit_move(self, text: str) -> bool:
        """Apply *text* (e.g. ``"f3-d5"``) for the side to move.

        Returns False, after notifying ``on_rejected``, when the text is
        malformed, the move is illegal, or the game is already decided.
        """
        if self._board.is_game_over:
            return self._reject(text, "game is over")
        try:
            move = Move.parse(text)
        except ValueError:
            return self._reject(text, "malformed move")
        if not self._board.is_legal_move(move):
            return self._reject(text, "illegal move")

        self._board.make_move(move)
        applied = self._board.last_move
        assert applied is not None
        _LOGGER.debug("Applied %s (move %d)", applied, self._board.moves_made)

        for cb in self.events.on_move:
            cb(applied, self._board)
        self._check_game_over()
        return True

    def undo_move(self) -> bool:
        """Retract the last move, reopening a decided game."""
        if self._board.moves_made == 0:
            return False
        self._board.retract()
        self._over_reported = False
        _LOGGER.debug("Retracted to move %d", self._board.moves_made)
        return True

    def set_move_limit(self, limit: int) -> None:
        """Tie the game after *limit* moves by each side."""
        self._board.set_move_limit(limit)
        if not self._board.is_game_over:
            self._over_reported = False

    def play_turn(self) -> Move | None:
        """Ask the side to move for a move and apply it.

        Returns the applied move, or None when the game is over or the player
        has no move to offer.
        """
        if self._check_game_over():
            return None
        player = self.current_player
        text = player.next_move(self._board.copy())
        if text is None:
            _LOGGER.info("%s has no move to offer", player.name)
            return None
        if not self.submit_move(text):
            raise InvariantViolation(f"{player.name} offered unusable move {text!r}")
        return self._board.last_move

    def play(self) -> GameResult:
        """Alternate turns until the game ends or a player stops answering."""
        while self.play_turn() is not None:
            pass
        return self.result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, text: str, reason: str) -> bool:
        _LOGGER.debug("Rejected %r: %s", text, reason)
        for cb in self.events.on_rejected:
            cb(text, reason)
        return False

    def _check_game_over(self) -> bool:
        if not self._board.is_game_over:
            return False
        if not self._over_reported:
            self._over_reported = True
            result = self.result
            _LOGGER.info(
                "Game over after %d moves: %s", self._board.moves_made, result.name
            )
            for cb in self.events.on_game_over:
                cb(result)
        return True

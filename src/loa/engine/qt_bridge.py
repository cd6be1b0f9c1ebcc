"""Qt bridge to run engine search in a worker thread.

Requests and results cross the thread boundary as plain values: a board (or a
top-rank-first layout string) goes in, move text such as ``"f3-d5"`` comes out.
"""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from loa.core.board import Board
from loa.core.enums import Piece
from loa.core.notation import board_from_text
from loa.engine.minimax import MinimaxSearchEngine
from loa.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)

_SIDES = {piece.full_name: piece for piece in (Piece.WHITE, Piece.BLACK)}


class EngineWorker(QObject):
    """Thread-affine worker that picks moves for the side to move.

    Signals:
        move_chosen: ``(request_id, move_text, score, depth, nodes)``. A depth
            of 0 means the node budget or a cancel cut the search short.
        game_finished: ``(request_id, winner)`` when the requested board is
            already decided; *winner* is ``"white"``, ``"black"`` or ``"tie"``.
        search_cancelled: ``(request_id,)`` after :meth:`cancel`.
        search_failed: ``(request_id, message)`` for bad requests or engine
            errors.
    """

    move_chosen = pyqtSignal(int, str, int, int, int)
    game_finished = pyqtSignal(int, str)
    search_cancelled = pyqtSignal(int)
    search_failed = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_max_depth", "_node_limit")

    def __init__(self, *, max_depth: int = 3, node_limit: int | None = None) -> None:
        super().__init__()
        self._engine = MinimaxSearchEngine()
        self._max_depth = max_depth
        self._node_limit = node_limit
        self._cancel_event = threading.Event()

    @property
    def limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self._max_depth, node_limit=self._node_limit)

    # ── Requests ─────────────────────────────────────────────────────────

    @pyqtSlot(object, int)
    def request_move(self, board_obj: object, request_id: int) -> None:
        """Choose a move for the side to move on *board_obj*."""
        if not isinstance(board_obj, Board):
            self.search_failed.emit(request_id, "Engine received invalid board")
            return
        self._run(board_obj, request_id)

    @pyqtSlot(str, str, int)
    def request_layout(self, layout: str, side: str, request_id: int) -> None:
        """Like :meth:`request_move`, for a layout string and ``"white"``/``"black"``."""
        turn = _SIDES.get(side.strip().lower())
        if turn is None:
            self.search_failed.emit(request_id, f"Unknown side to move: {side!r}")
            return
        try:
            board = board_from_text(layout, turn)
        except ValueError as exc:
            self.search_failed.emit(request_id, str(exc))
            return
        self._run(board, request_id)

    # ── Control ──────────────────────────────────────────────────────────

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Plies searched per move (takes effect on the next request)."""
        self._max_depth = max_depth

    @pyqtSlot(int)
    def set_node_limit(self, node_limit: int) -> None:
        """Node budget per move; 0 or less searches the full depth."""
        self._node_limit = node_limit if node_limit > 0 else None

    # ── Internal ─────────────────────────────────────────────────────────

    def _run(self, board: Board, request_id: int) -> None:
        winner = board.winner
        if winner is not None:
            name = "tie" if winner == Piece.EMPTY else winner.full_name
            self.game_finished.emit(request_id, name)
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(
                board, self.limits, is_cancelled=self._cancel_event.is_set
            )
        except Exception as exc:
            _LOGGER.warning("Search %d failed: %s", request_id, exc)
            self.search_failed.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
        elif result.best_move is None:
            self.search_failed.emit(
                request_id, f"No legal move for {board.turn.full_name}"
            )
        else:
            self.move_chosen.emit(
                request_id,
                str(result.best_move),
                result.score,
                result.depth,
                result.nodes,
            )

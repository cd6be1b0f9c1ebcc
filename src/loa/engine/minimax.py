"""Pure-Python Lines of Action search (minimax + alpha-beta)."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from time import sleep

from loa.core.board import Board
from loa.core.enums import Piece
from loa.core.errors import InvariantViolation
from loa.core.move import Move
from loa.engine.search import CancelCheck, IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

INFINITY = 2**31 - 1
WINNING_VALUE = INFINITY - 20
MAXIMIZE = 1
MINIMIZE = -1

_SPREAD_WEIGHT = 5
_REGION_WEIGHT = 2
_YIELD_INTERVAL_NODES = 4096


def _never_cancelled() -> bool:
    return False


class MinimaxSearchEngine(IEngine):
    """Fixed-depth minimax searcher with alpha-beta pruning.

    Every child position is a fresh copy of its parent, explored in
    :meth:`Board.legal_moves` order. Only a strictly better score replaces the
    current best, so ties go to the first move generated and a search on the
    same position always returns the same move.

    Scores are from white's point of view: white maximizes, black minimizes.
    """

    __slots__ = (
        "_cancel_check",
        "_node_limit",
        "_nodes",
        "_last_yield_nodes",
        "_stopped",
        "_found_move",
    )

    def __init__(self) -> None:
        self._cancel_check: CancelCheck = _never_cancelled
        self._node_limit: int | None = None
        self._nodes = 0
        self._last_yield_nodes = 0
        self._stopped = False
        self._found_move: Move | None = None

    def search(
        self,
        board: Board,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        self._last_yield_nodes = 0
        self._stopped = False
        self._found_move = None
        self._cancel_check = is_cancelled or _never_cancelled
        self._node_limit = limits.node_limit

        if board.is_game_over:
            return SearchResult(None, self.static_score(board), 0, self._nodes)

        work = board.copy()
        sense = MAXIMIZE if work.turn == Piece.WHITE else MINIMIZE
        score = self.find_move(
            work, limits.max_depth, True, sense, -INFINITY, INFINITY
        )

        best_move = self._found_move
        depth = limits.max_depth
        if self._stopped:
            depth = 0
            if best_move is None:
                legal = work.legal_moves()
                best_move = legal[0] if legal else None

        _LOGGER.debug(
            "Search for %s: move=%s score=%d depth=%d nodes=%d",
            work.turn,
            best_move,
            score,
            depth,
            self._nodes,
        )
        return SearchResult(best_move, score, depth, self._nodes)

    def choose_move(self, board: Board, limits: SearchLimits | None = None) -> Move:
        """Best move for the side to move on *board*.

        The game must not be over.
        """
        if board.is_game_over:
            raise InvariantViolation("Cannot choose a move: the game is over")
        result = self.search(board, limits or SearchLimits())
        if result.best_move is None:
            raise InvariantViolation(f"No legal move for {board.turn.full_name}")
        return result.best_move

    def find_move(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
    ) -> int:
        """Minimax value of *board* searched *depth* plies deep.

        When *save_move* is set, the move leading to the best child is kept
        as the search result. Terminal nodes never record a move.
        """
        self._nodes += 1
        if depth == 0 or board.is_game_over:
            return self.static_score(board)
        if self._should_stop():
            return self.static_score(board)

        best_child: Board | None = None
        best_score = -INFINITY if sense == MAXIMIZE else INFINITY

        for child in self._children(board):
            score = self.find_move(child, depth - 1, False, -sense, alpha, beta)
            if sense == MAXIMIZE:
                if score > best_score:
                    best_score = score
                    best_child = child
                alpha = max(alpha, score)
            else:
                if score < best_score:
                    best_score = score
                    best_child = child
                beta = min(beta, score)
            if beta <= alpha or self._stopped:
                break

        if best_child is None:
            # Side to move is stuck with no legal moves.
            return self.static_score(board)
        if save_move:
            self._found_move = best_child.last_move
        return best_score

    def static_score(self, board: Board) -> int:
        """Heuristic value of *board*; positive favours white."""
        if board.is_game_over:
            winner = board.winner
            if winner == Piece.WHITE:
                return WINNING_VALUE
            if winner == Piece.BLACK:
                return -WINNING_VALUE
            return 0

        white_regions = board.region_sizes(Piece.WHITE)
        black_regions = board.region_sizes(Piece.BLACK)
        white_max = white_regions[0] if white_regions else 0
        black_max = black_regions[0] if black_regions else 0
        white_stragglers = board.piece_count(Piece.WHITE) - white_max
        black_stragglers = board.piece_count(Piece.BLACK) - black_max

        return _SPREAD_WEIGHT * (black_stragglers - white_stragglers) + (
            _REGION_WEIGHT * (len(black_regions) - len(white_regions))
        )

    def _children(self, board: Board) -> Iterator[Board]:
        for move in board.legal_moves():
            child = board.copy()
            child.make_move(move)
            yield child

    def _should_stop(self) -> bool:
        if self._stopped:
            return True
        if self._cancel_check is _never_cancelled and self._node_limit is None:
            return False
        if self._nodes - self._last_yield_nodes >= _YIELD_INTERVAL_NODES:
            self._last_yield_nodes = self._nodes
            sleep(0.001)
        if self._cancel_check() or (
            self._node_limit is not None and self._nodes >= self._node_limit
        ):
            self._stopped = True
        return self._stopped

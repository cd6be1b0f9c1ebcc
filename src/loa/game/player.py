"""Players: anything that can name a move, as text, for one side.

A player answers :meth:`Player.next_move` with move text such as ``"f3-d5"``
or ``None`` when it has nothing more to play (input ran out, the user quit).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from loa.core.board import Board
from loa.core.enums import Piece
from loa.core.move import Move
from loa.engine.minimax import MinimaxSearchEngine
from loa.engine.search import IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)

RejectCallback = Callable[[str, str], None]  # offending text, reason


class Player(ABC):
    """One side of a match."""

    __slots__ = ("_side", "_name")

    def __init__(self, side: Piece, name: str) -> None:
        if side == Piece.EMPTY:
            raise ValueError("A player must play WHITE or BLACK")
        self._side = side
        self._name = name

    @property
    def side(self) -> Piece:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def next_move(self, board: Board) -> str | None:
        """Move text for *board*, where it is this player's turn."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._side.full_name}, {self._name!r})"


class TextPlayer(Player):
    """Reads moves typed by a person, one ``"f3-d5"`` per line.

    Blank lines are skipped. Lines that do not parse, or name a move that is
    not legal on the board, are reported through *on_reject* and the next line
    is read. The player runs out of moves when *lines* is exhausted.
    """

    __slots__ = ("_lines", "_on_reject")

    def __init__(
        self,
        side: Piece,
        lines: Iterable[str],
        name: str = "",
        on_reject: RejectCallback | None = None,
    ) -> None:
        super().__init__(side, name or side.full_name.capitalize())
        self._lines = iter(lines)
        self._on_reject = on_reject

    def next_move(self, board: Board) -> str | None:
        for line in self._lines:
            text = line.strip()
            if not text:
                continue
            try:
                move = Move.parse(text)
            except ValueError:
                self._reject(text, "malformed move")
                continue
            if not board.is_legal_move(move):
                self._reject(text, "illegal move")
                continue
            return str(move)
        return None

    def _reject(self, text: str, reason: str) -> None:
        _LOGGER.debug("%s: %s %r", self._name, reason, text)
        if self._on_reject is not None:
            self._on_reject(text, reason)


class MachinePlayer(Player):
    """Picks moves with a search engine (fixed-depth minimax by default)."""

    __slots__ = ("_engine", "_limits")

    def __init__(
        self,
        side: Piece,
        engine: IEngine | None = None,
        limits: SearchLimits | None = None,
        name: str = "Engine",
    ) -> None:
        super().__init__(side, name)
        self._engine = engine if engine is not None else MinimaxSearchEngine()
        self._limits = limits or SearchLimits()

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    def next_move(self, board: Board) -> str | None:
        result = self._engine.search(board, self._limits)
        if result.best_move is None:
            return None
        return str(result.best_move)

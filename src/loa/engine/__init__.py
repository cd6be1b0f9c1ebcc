"""Search engine package: minimax implementation and Qt worker bridge."""

from loa.engine.minimax import WINNING_VALUE, MinimaxSearchEngine
from loa.engine.qt_bridge import EngineWorker
from loa.engine.search import IEngine, SearchLimits, SearchResult

DefaultEngine: type[IEngine] = MinimaxSearchEngine

__all__ = [
    "DefaultEngine",
    "EngineWorker",
    "IEngine",
    "MinimaxSearchEngine",
    "SearchLimits",
    "SearchResult",
    "WINNING_VALUE",
]

"""Error kinds raised by the core."""

from __future__ import annotations


class InvariantViolation(RuntimeError):
    """A caller broke a precondition of the board or engine.

    Raised for programming errors such as applying an illegal move or
    retracting with an empty history. Expected negative results (a move that is
    simply not legal) are reported by return values instead.
    """

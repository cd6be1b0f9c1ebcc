"""Move value object ("f3-d5" notation)."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from loa.core.types import Direction, Square, parse_square

_MOVE_PATTERN = re.compile(r"^([a-h][1-8])-([a-h][1-8])$")


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    ``is_capture`` is set by the board when the move lands on an opposing piece;
    it does not show up in the text form.
    """

    origin: Square
    destination: Square
    is_capture: bool = False

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def direction(self) -> Direction | None:
        """Line of travel, or None when the offset is not straight/diagonal."""
        return self.origin.direction_to(self.destination)

    @property
    def length(self) -> int:
        """Number of squares travelled along the line."""
        if self.direction is None:
            raise ValueError(f"Move {self} does not follow a line")
        return self.origin.distance_to(self.destination)

    def capture_move(self) -> Move:
        """Same move, flagged as a capture."""
        return replace(self, is_capture=True)

    # ── Serialisation ────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse move text, e.g. 'f3-d5'."""
        match = _MOVE_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_square(match.group(1)), parse_square(match.group(2)))

    def __str__(self) -> str:
        return f"{self.origin.name}-{self.destination.name}"

"""Board - Lines of Action game state with make/retract and win detection."""

from __future__ import annotations

from collections.abc import Sequence

from loa.core.enums import Piece
from loa.core.errors import InvariantViolation
from loa.core.move import Move
from loa.core.regions import region_sizes as _compute_region_sizes
from loa.core.types import BOARD_SIZE, SQUARES, Direction, Square

DEFAULT_MOVE_LIMIT = 60  # per side

_W = Piece.WHITE
_B = Piece.BLACK
_E = Piece.EMPTY

# Standard opening layout, bottom row (rank 1) first: INITIAL_PIECES[row][col].
INITIAL_PIECES: tuple[tuple[Piece, ...], ...] = (
    (_E, _B, _B, _B, _B, _B, _B, _E),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_E, _B, _B, _B, _B, _B, _B, _E),
)


class Board:
    """Mutable 8x8 Lines of Action board.

    Holds the cells, the side to move and the log of unretracted moves.
    Region sizes and the winner are computed on demand and cached until the
    next mutation.

    Args:
        contents: 8x8 layout indexed ``contents[row][col]`` with row 0 being
            rank 1. Defaults to the standard opening.
        turn: Side to move first.
    """

    __slots__ = (
        "_cells",
        "_turn",
        "_moves",
        "_move_limit",
        "_regions",
        "_winner",
        "_winner_known",
    )

    def __init__(
        self,
        contents: Sequence[Sequence[Piece]] | None = None,
        turn: Piece = Piece.BLACK,
    ) -> None:
        self._cells: list[Piece] = [Piece.EMPTY] * (BOARD_SIZE * BOARD_SIZE)
        self._turn = turn
        self._moves: list[Move] = []
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._regions: dict[Piece, list[int]] | None = None
        self._winner: Piece | None = None
        self._winner_known = False
        self.initialize(INITIAL_PIECES if contents is None else contents, turn)

    # ── Setup / copying ──────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, black to move."""
        return cls()

    def initialize(self, contents: Sequence[Sequence[Piece]], turn: Piece) -> None:
        """Reset to *contents* with *turn* to move and an empty history."""
        if len(contents) != BOARD_SIZE or any(
            len(row) != BOARD_SIZE for row in contents
        ):
            raise ValueError("Board layout must be 8x8")
        if turn == Piece.EMPTY:
            raise ValueError("Side to move must be WHITE or BLACK")

        for r, row in enumerate(contents):
            for c, piece in enumerate(row):
                self._cells[r * BOARD_SIZE + c] = Piece(piece)
        self._turn = Piece(turn)
        self._moves.clear()
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._invalidate()

    def clear(self) -> None:
        """Return to the standard opening."""
        self.initialize(INITIAL_PIECES, Piece.BLACK)

    def copy(self) -> Board:
        """Deep copy: independent cells, history and caches."""
        board = Board.__new__(Board)
        board.copy_from(self)
        return board

    def copy_from(self, other: Board) -> None:
        """Make this board an independent copy of *other*."""
        if other is self:
            return
        self._cells = other._cells.copy()
        self._turn = other._turn
        self._moves = other._moves.copy()
        self._move_limit = other._move_limit
        self._regions = (
            None
            if other._regions is None
            else {side: sizes.copy() for side, sizes in other._regions.items()}
        )
        self._winner = other._winner
        self._winner_known = other._winner_known

    # ── Element access ───────────────────────────────────────────────────

    def __getitem__(self, sq: Square) -> Piece:
        return self._cells[sq.index]

    def get(self, sq: Square) -> Piece:
        return self._cells[sq.index]

    def set(self, sq: Square, piece: Piece, next_side: Piece | None = None) -> None:
        """Put *piece* on *sq*; also hand the move to *next_side* if given."""
        self._cells[sq.index] = piece
        if next_side is not None:
            self._turn = next_side
        self._invalidate()

    @property
    def turn(self) -> Piece:
        """Side to move."""
        return self._turn

    @property
    def moves_made(self) -> int:
        return len(self._moves)

    @property
    def moves(self) -> list[Move]:
        """Unretracted moves, oldest first."""
        return self._moves.copy()

    @property
    def last_move(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    @property
    def move_limit(self) -> int:
        """Total half-moves after which the game is tied."""
        return self._move_limit

    def set_move_limit(self, limit: int) -> None:
        """Tie the game after *limit* moves by each side."""
        if 2 * limit <= self.moves_made:
            raise InvariantViolation(
                f"Move limit {limit} too small: {self.moves_made} moves already made"
            )
        self._move_limit = 2 * limit
        self._winner_known = False

    # ── Legality ─────────────────────────────────────────────────────────

    def line_count(self, origin: Square, direction: Direction) -> int:
        """Pieces on the whole line through *origin* along *direction*."""
        count = 0 if self._cells[origin.index] == Piece.EMPTY else 1
        for ray in (origin.ray(direction), origin.ray(direction.opposite)):
            for sq in ray:
                if self._cells[sq.index] != Piece.EMPTY:
                    count += 1
        return count

    def is_legal(self, origin: Square, destination: Square) -> bool:
        """Whether *origin*-*destination* is a legal move for the side to move."""
        if origin == destination:
            return False
        piece = self._cells[origin.index]
        if piece == Piece.EMPTY or piece != self._turn:
            return False
        direction = origin.direction_to(destination)
        if direction is None:
            return False
        distance = origin.distance_to(destination)
        if distance != self.line_count(origin, direction):
            return False
        return not self._is_blocked(origin, direction, distance)

    def is_legal_move(self, move: Move) -> bool:
        """Like :meth:`is_legal`; the capture flag of *move* is ignored."""
        return self.is_legal(move.origin, move.destination)

    def _is_blocked(self, origin: Square, direction: Direction, distance: int) -> bool:
        ray = origin.ray(direction)
        enemy = self._turn.opposite
        for sq in ray[: distance - 1]:
            if self._cells[sq.index] == enemy:
                return True
        return self._cells[ray[distance - 1].index] == self._turn

    def legal_moves(self) -> list[Move]:
        """All legal moves, by origin index then destination index."""
        legal: list[Move] = []
        for sq in SQUARES:
            if self._cells[sq.index] != self._turn:
                continue
            targets: list[Square] = []
            for direction in Direction:
                distance = self.line_count(sq, direction)
                dest = sq.move_dest(direction, distance)
                if dest is None or self._is_blocked(sq, direction, distance):
                    continue
                targets.append(dest)
            targets.sort(key=lambda target: target.index)
            legal.extend(Move(sq, target) for target in targets)
        return legal

    # ── Make / retract ───────────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply a legal *move*, flagging it as a capture when it takes a piece."""
        if not self.is_legal(move.origin, move.destination):
            raise InvariantViolation(f"Illegal move: {move}")
        mover = self._cells[move.origin.index]
        target = self._cells[move.destination.index]
        if target != Piece.EMPTY and target != mover:
            move = move.capture_move()
        elif move.is_capture:
            move = Move(move.origin, move.destination)

        self._cells[move.destination.index] = mover
        self._cells[move.origin.index] = Piece.EMPTY
        self._turn = mover.opposite
        self._moves.append(move)
        self._invalidate()

    def retract(self) -> None:
        """Undo the last move."""
        if not self._moves:
            raise InvariantViolation("No moves to retract")
        last = self._moves.pop()
        mover = self._cells[last.destination.index]
        self._cells[last.origin.index] = mover
        self._cells[last.destination.index] = (
            mover.opposite if last.is_capture else Piece.EMPTY
        )
        self._turn = self._turn.opposite
        self._invalidate()

    # ── Regions / game end ───────────────────────────────────────────────

    def region_sizes(self, side: Piece) -> list[int]:
        """Sizes of *side*'s connected regions, largest first."""
        if self._regions is None:
            self._regions = _compute_region_sizes(self._cells)
        return self._regions[side].copy()

    def pieces_contiguous(self, side: Piece) -> bool:
        """Whether *side*'s pieces form one region (trivially true with none)."""
        return len(self.region_sizes(side)) <= 1

    def piece_count(self, side: Piece) -> int:
        """Number of cells holding *side* (EMPTY counts empty cells)."""
        return self._cells.count(side)

    @property
    def winner(self) -> Piece | None:
        """Winning side, EMPTY for a tie, or None while the game goes on."""
        if not self._winner_known:
            white_joined = self.pieces_contiguous(Piece.WHITE)
            black_joined = self.pieces_contiguous(Piece.BLACK)
            if white_joined and black_joined:
                # The side that just moved joined both groups.
                self._winner = self._turn.opposite
            elif white_joined:
                self._winner = Piece.WHITE
            elif black_joined:
                self._winner = Piece.BLACK
            elif self.moves_made >= self._move_limit:
                self._winner = Piece.EMPTY
            else:
                self._winner = None
            self._winner_known = True
        return self._winner

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    def _invalidate(self) -> None:
        self._regions = None
        self._winner_known = False

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells and self._turn == other._turn

    def __str__(self) -> str:
        lines = ["==="]
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = self._cells[row * BOARD_SIZE : (row + 1) * BOARD_SIZE]
            lines.append("    " + "".join(f"{piece.abbrev} " for piece in cells))
        lines.append(f"Next move: {self._turn.full_name}")
        lines.append("===")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(turn={self._turn.full_name}, moves_made={self.moves_made})"

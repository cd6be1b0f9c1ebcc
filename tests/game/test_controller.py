"""Tests for GameController - the match driver."""

import pytest

from loa.core.board import Board
from loa.core.enums import GameResult, Piece
from loa.core.errors import InvariantViolation
from loa.core.move import Move
from loa.engine import SearchLimits
from loa.game.controller import GameController
from loa.game.player import MachinePlayer, Player, TextPlayer


class _StubbornPlayer(Player):
    def next_move(self, board: Board) -> str | None:
        return "a1-a1"


def _make_text_controller(
    white_lines: list[str] | None = None,
    black_lines: list[str] | None = None,
    board: Board | None = None,
    move_limit: int | None = None,
) -> GameController:
    """Helper: two text readers."""
    return GameController(
        TextPlayer(Piece.WHITE, white_lines or [], "W"),
        TextPlayer(Piece.BLACK, black_lines or [], "B"),
        board=board,
        move_limit=move_limit,
    )


def _machine(side: Piece, depth: int = 1) -> MachinePlayer:
    return MachinePlayer(side, limits=SearchLimits(max_depth=depth))


class TestSetup:
    def test_defaults_to_opening(self) -> None:
        ctrl = _make_text_controller()
        assert ctrl.board == Board()
        assert ctrl.result == GameResult.IN_PROGRESS
        assert ctrl.current_player.side == Piece.BLACK
        assert ctrl.player(Piece.WHITE).name == "W"

    def test_players_must_match_sides(self) -> None:
        with pytest.raises(ValueError):
            GameController(_machine(Piece.BLACK), _machine(Piece.WHITE))

    def test_custom_board_is_copied(self, board1: Board) -> None:
        ctrl = _make_text_controller(board=board1)
        assert ctrl.board == board1
        ctrl.submit_move("f3-d5")
        assert board1.moves_made == 0
        assert ctrl.board.moves_made == 1

    def test_move_limit(self) -> None:
        ctrl = _make_text_controller(move_limit=7)
        assert ctrl.board.move_limit == 14


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_text_controller()
        assert ctrl.submit_move("b1-b3")
        assert ctrl.board.turn == Piece.WHITE
        assert ctrl.board.moves_made == 1

    def test_rejections_reported(self) -> None:
        ctrl = _make_text_controller()
        rejected: list[tuple[str, str]] = []
        ctrl.events.on_rejected.append(lambda t, r: rejected.append((t, r)))

        assert not ctrl.submit_move("b1-b2")
        assert not ctrl.submit_move("a2-a8")
        assert not ctrl.submit_move("hello")

        assert rejected == [
            ("b1-b2", "illegal move"),
            ("a2-a8", "illegal move"),
            ("hello", "malformed move"),
        ]
        assert ctrl.board.moves_made == 0

    def test_move_event_carries_capture(self, board1: Board) -> None:
        ctrl = _make_text_controller(board=board1)
        events: list[Move] = []
        ctrl.events.on_move.append(lambda m, board: events.append(m))
        ctrl.submit_move("f3-d5")
        assert [str(m) for m in events] == ["f3-d5"]
        assert events[0].is_capture

    def test_game_over_on_connection(self, one_move_win: Board) -> None:
        ctrl = _make_text_controller(board=one_move_win)
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)

        assert ctrl.submit_move("b1-b2")

        assert results == [GameResult.BLACK_WINS]
        assert ctrl.result == GameResult.BLACK_WINS
        assert not ctrl.submit_move("h5-h7")
        assert results == [GameResult.BLACK_WINS]

    def test_draw_at_move_limit(self, board1: Board) -> None:
        ctrl = _make_text_controller(board=board1, move_limit=1)
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)

        ctrl.submit_move("f3-b3")
        ctrl.submit_move("a2-a7")

        assert results == [GameResult.DRAW]

    def test_set_move_limit_too_small(self) -> None:
        ctrl = _make_text_controller()
        ctrl.submit_move("b1-b3")
        ctrl.submit_move(str(ctrl.board.legal_moves()[0]))
        with pytest.raises(InvariantViolation):
            ctrl.set_move_limit(1)


class TestUndo:
    def test_undo_restores(self) -> None:
        ctrl = _make_text_controller()
        ctrl.submit_move("b1-b3")
        assert ctrl.undo_move()
        assert ctrl.board == Board()
        assert not ctrl.undo_move()

    def test_undo_reopens_finished_game(self, one_move_win: Board) -> None:
        ctrl = _make_text_controller(board=one_move_win)
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)

        ctrl.submit_move("b1-b2")
        assert ctrl.undo_move()
        assert ctrl.result == GameResult.IN_PROGRESS
        ctrl.submit_move("c3-c2")

        assert results == [GameResult.BLACK_WINS, GameResult.BLACK_WINS]

    def test_raising_limit_reopens_tie(self, board1: Board) -> None:
        ctrl = _make_text_controller(board=board1, move_limit=1)
        ctrl.submit_move("f3-b3")
        ctrl.submit_move("a2-a7")
        assert ctrl.result == GameResult.DRAW
        ctrl.set_move_limit(5)
        assert ctrl.result == GameResult.IN_PROGRESS
        assert ctrl.submit_move(str(ctrl.board.legal_moves()[0]))


class TestPlay:
    def test_machine_takes_winning_move(self, one_move_win: Board) -> None:
        ctrl = GameController(
            TextPlayer(Piece.WHITE, []), _machine(Piece.BLACK), board=one_move_win
        )
        assert ctrl.play_turn() == Move.parse("b1-b2")
        assert ctrl.play_turn() is None
        assert ctrl.result == GameResult.BLACK_WINS

    def test_text_against_machine(self) -> None:
        ctrl = GameController(
            _machine(Piece.WHITE),
            TextPlayer(Piece.BLACK, ["b1-b2", "b1-b3"]),
        )
        assert ctrl.play() == GameResult.IN_PROGRESS
        assert ctrl.board.moves_made == 2
        assert ctrl.board.moves[0] == Move.parse("b1-b3")

    def test_machines_play_to_the_end(self) -> None:
        ctrl = GameController(
            _machine(Piece.WHITE), _machine(Piece.BLACK), move_limit=6
        )
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)

        result = ctrl.play()

        assert result != GameResult.IN_PROGRESS
        assert results == [result]
        assert ctrl.board.moves_made <= 12

    def test_finished_board_reports_once(self, board2: Board) -> None:
        ctrl = _make_text_controller(board=board2)
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)

        assert ctrl.play() == GameResult.BLACK_WINS
        assert ctrl.play_turn() is None
        assert results == [GameResult.BLACK_WINS]

    def test_unusable_move_raises(self) -> None:
        ctrl = GameController(
            _machine(Piece.WHITE), _StubbornPlayer(Piece.BLACK, "Stubborn")
        )
        with pytest.raises(InvariantViolation, match="Stubborn"):
            ctrl.play_turn()

"""Game management layer - players and the match controller.

Quick start::

    from loa.core import Piece
    from loa.game import GameController, MachinePlayer, TextPlayer

    ctrl = GameController(
        white=MachinePlayer(Piece.WHITE),
        black=TextPlayer(Piece.BLACK, iter(input, "quit")),
        move_limit=40,
    )
    print(ctrl.play().name)
"""

from loa.game.controller import GameController, GameEvents
from loa.game.player import MachinePlayer, Player, TextPlayer

__all__ = [
    "GameController",
    "GameEvents",
    "MachinePlayer",
    "Player",
    "TextPlayer",
]

"""Game management layer: the state machine of a single match.

Quick start::

    from chessrules.game import Cell, Game

    game = Game()
    game.move_piece_from(Cell.at(6, 5))
    print(game.move_piece_to(Cell.at(5, 5)))
"""

from chessrules.game.game import Game, Selection
from chessrules.game.options import GameOptions
from chessrules.game.records import Cell, GameEvents, MoveRecord

__all__ = [
    "Cell",
    "Game",
    "GameEvents",
    "GameOptions",
    "MoveRecord",
    "Selection",
]

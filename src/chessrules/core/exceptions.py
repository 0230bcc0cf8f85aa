"""Exceptions raised by the rule engine."""


class ChessError(Exception):
    """Base class for every error raised by :mod:`chessrules`."""


class InvalidSelection(ChessError):
    """The chosen source cell cannot be moved from right now.

    Raised for an empty cell, an opponent's piece, a cell off the board or a
    game that is already over.
    """


class IllegalMove(ChessError):
    """The chosen destination is not a legal move for the selected piece."""


class InvariantViolation(ChessError):
    """Internal consistency failure, e.g. a side without a king.

    Indicates a bug or a corrupted set-up rather than a user mistake; the game
    instance should no longer be trusted.
    """

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.types import parse_square
from chessrules.game import Cell, Game

PlayFn = Callable[..., list[str]]


def _play(game: Game, *moves: str) -> list[str]:
    """Play moves given as 'e2e4' and return the result messages."""
    messages: list[str] = []
    for move in moves:
        game.move_piece_from(Cell(parse_square(move[:2])))
        messages.append(game.move_piece_to(Cell(parse_square(move[2:]))))
    return messages


@pytest.fixture
def game() -> Game:
    """A fresh game from the standard layout."""
    return Game()


@pytest.fixture
def play() -> PlayFn:
    return _play

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.position import Position
from chessrules.engine import apply_uci, new_position


def _play(position: Position, *moves: str) -> Position:
    """Apply UCI *moves* in order, failing the test on the first rejection."""
    for text in moves:
        assert apply_uci(position, text), f"{text} rejected in {position.encode()}"
    return position


@pytest.fixture
def start() -> Position:
    """A fresh standard starting position."""
    return new_position()


@pytest.fixture
def play() -> Callable[..., Position]:
    return _play

"""Shared test fixtures and helpers."""

import matplotlib
matplotlib.use('Agg')

import pytest

from pdsim.game.payoffs import CLASSIC, PayoffMatrix
from pdsim.game.strategy import Strategy


class Scripted(Strategy):
    """Plays a fixed list of choices, one per round."""
    def __init__(self, choices, name = None):
        super().__init__(name)
        self.choices = [bool(choice) for choice in choices]
    def decide(self, history, seat):
        return self.choices[history.round_count()]


@pytest.fixture
def classic():
    """Axelrod payoffs (3, 0, 5, 1)."""
    return CLASSIC


@pytest.fixture
def dilemma():
    """Payoffs satisfying c > a, b > d, d > a."""
    return PayoffMatrix(1, 5, 3, 2, name = 'Costs')


@pytest.fixture
def scripted():
    """Factory for strategies that play a fixed sequence of choices (0 = cooperate, 1 = compete)."""
    return Scripted

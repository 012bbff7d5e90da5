"""Payoff matrices for binary symmetric games where each player has 2 choices, Cooperate or Compete:
    a for (Cooperate, Cooperate)
    b for (Cooperate, Compete)
    c for (Compete, Cooperate)
    d for (Compete, Compete)
All four values are from the point of view of the player in seat 0; the player in seat 1 receives the transposed matrix."""

import numpy as np
import pandas as pd

from pdsim.game.errors import InvalidConfig

CHOICE_NAMES = ('cooperation', 'competition')


class PayoffMatrix():
    """A class to hold the four payoffs of a 2x2 symmetric game and to assign payoffs to an outcome accordingly."""
    def __init__(self, a, b, c, d, name = 'Untitled'):
        """a, b, c, d are the payoffs to seat 0 for each of the four events.
        name is the name of the game."""
        try:
            values = np.array([a, b, c, d], dtype = float)
        except (TypeError, ValueError):
            raise InvalidConfig("Payoffs must be real numbers.")
        if (not np.all(np.isfinite(values))):
            raise InvalidConfig("Payoffs must be finite.")
        (self.a, self.b, self.c, self.d) = values
        self.name = name
        # mat[seat, choice0, choice1] is the payoff to seat for the event (choice0, choice1)
        mat = values.reshape((2, 2))
        self.mat = np.array([mat, mat.T])
        self.mat.setflags(write = False)
    @classmethod
    def from_sequence(cls, values, name = 'Untitled'):
        """Initialize from a sequence of 4 values (a, b, c, d)."""
        try:
            values = list(values)
        except TypeError:
            raise InvalidConfig("Payoffs must be a sequence of 4 values, got {!r}.".format(values))
        if (len(values) != 4):
            raise InvalidConfig("A payoff matrix needs exactly 4 values, got {}.".format(len(values)))
        return cls(*values, name = name)
    @property
    def values(self):
        """The tuple (a, b, c, d)."""
        return (self.a, self.b, self.c, self.d)
    def satisfies_dilemma(self):
        """Returns True if c > a, b > d and d > a, the ordering the game is designed around. This is not enforced."""
        return (self.c > self.a) and (self.b > self.d) and (self.d > self.a)
    def payoff(self, choices):
        """Given the pair of choices made in one round, returns the tuple of payoffs to each seat."""
        (choice0, choice1) = (int(choices[0]), int(choices[1]))
        return (self.mat[0, choice0, choice1], self.mat[1, choice0, choice1])
    def scores(self, histogram):
        """Given an event histogram (counts for (coop, coop), (coop, compete), (compete, coop), (compete, compete)), returns the total score of each seat."""
        hist = np.asarray(histogram)
        if (hist.shape != (4,)):
            raise ValueError("Event histogram must have 4 buckets.")
        common = hist[0] * self.a + hist[3] * self.d
        return (float(common + hist[1] * self.b + hist[2] * self.c), float(common + hist[1] * self.c + hist[2] * self.b))
    def to_frame(self):
        """Returns a DataFrame whose entries are the (seat 0, seat 1) payoff pairs, rows indexed by seat 0's choice."""
        cells = [[(float(self.mat[0, i, j]), float(self.mat[1, i, j])) for j in range(2)] for i in range(2)]
        df = pd.DataFrame(cells, index = CHOICE_NAMES, columns = CHOICE_NAMES)
        df.index.name = 'one \\ two'
        return df
    def __eq__(self, other):
        return isinstance(other, PayoffMatrix) and (self.values == other.values)
    def __hash__(self):
        return hash(self.values)
    def __repr__(self):
        return 'PayoffMatrix "{}" (a = {}, b = {}, c = {}, d = {}):\n\n{}'.format(self.name, self.a, self.b, self.c, self.d, self.to_frame())


# Axelrod's tournament payoffs (R = 3, S = 0, T = 5, P = 1)
CLASSIC = PayoffMatrix(3, 0, 5, 1, name = "Prisoner's Dilemma")

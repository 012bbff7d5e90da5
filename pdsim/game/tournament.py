"""Round-robin tournaments between Strategy templates.
Every Match is played between fresh copies of the templates, so matches share no state and the templates themselves are never played."""

import itertools
import logging

import numpy as np
import pandas as pd

from pdsim.game.errors import InvalidConfig
from pdsim.game.match import Match
from pdsim.game.strategy import StochasticStrategy
from pdsim.utils import check_positive_int, check_rounds

logger = logging.getLogger(__name__)


class Tournament():
    """Each pair of strategies (including each strategy against a copy of itself) plays repetitions Matches of nrounds rounds."""
    def __init__(self, strategies, nrounds, payoffs, repetitions = 1, seed = None):
        """strategies is a sequence of Strategy templates with distinct names.
           payoffs is a PayoffMatrix used to score every Match.
           seed seeds the generator that reseeds the copies of stochastic strategies."""
        self.strategies = list(strategies)
        if (len(self.strategies) == 0):
            raise InvalidConfig("A Tournament needs at least one strategy.")
        self.names = [strategy.name for strategy in self.strategies]
        if (len(set(self.names)) != len(self.names)):
            raise InvalidConfig("Strategy names must be unique in a Tournament: {}".format(self.names))
        if (payoffs is None):
            raise InvalidConfig("A Tournament needs a payoff matrix.")
        self.nrounds = check_rounds(nrounds)
        self.payoffs = payoffs
        self.repetitions = check_positive_int(repetitions, 'repetitions')
        self.rng = np.random.default_rng(seed)
        self.matches = []
    def _instantiate(self, template):
        if isinstance(template, StochasticStrategy):
            return template.spawn(int(self.rng.integers(2 ** 32)))
        return template.copy()
    def pairings(self):
        """Index pairs (i, j) with i <= j."""
        return list(itertools.combinations_with_replacement(range(len(self.strategies)), 2))
    def play(self):
        """Plays all the Matches (replacing any previous results) and returns them."""
        self.matches = []
        for (i, j) in self.pairings():
            logger.debug('Pairing %s vs. %s', self.names[i], self.names[j])
            for _ in range(self.repetitions):
                strategies = (self._instantiate(self.strategies[i]), self._instantiate(self.strategies[j]))
                self.matches.append(((i, j), Match(strategies, self.nrounds, self.payoffs)))
        return [match for (_, match) in self.matches]
    def score_table(self):
        """Returns a DataFrame whose (row, column) entry is the mean score of the row strategy against the column strategy."""
        if (not self.matches):
            self.play()
        n = len(self.strategies)
        totals = np.zeros((n, n))
        for ((i, j), match) in self.matches:
            (score0, score1) = match.scores()
            if (i == j):
                totals[i, i] += (score0 + score1) / 2
            else:
                totals[i, j] += score0
                totals[j, i] += score1
        return pd.DataFrame(totals / self.repetitions, index = self.names, columns = self.names)
    def ranking(self):
        """Returns a Series of each strategy's total mean score over all opponents, best first."""
        return self.score_table().sum(axis = 1).sort_values(ascending = False)

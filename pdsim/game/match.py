import logging

import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator
import numpy as np
import pandas as pd

from pdsim.game.errors import DuplicatePlayer, InvalidConfig, PayoffsUnset
from pdsim.game.history import OutcomeLog
from pdsim.game.payoffs import CHOICE_NAMES, PayoffMatrix
from pdsim.utils import SEATS, check_rounds, check_seat

logger = logging.getLogger(__name__)


def force_integer_xaxis():
    plt.gca().xaxis.set_major_locator(MaxNLocator(integer = True))

class Match():
    """A fixed number of rounds between two Strategies, yielding an OutcomeLog of their choices.
    The Match is played in full as soon as it is constructed; afterwards only the payoff matrix may be replaced."""
    def __init__(self, strategies, nrounds, payoffs = None):
        """strategies is a pair of distinct Strategy instances, for seats 0 and 1.
           nrounds is the number of rounds to play.
           payoffs is an optional PayoffMatrix (or sequence of 4 values), needed only to compute scores."""
        strategies = tuple(strategies)
        if (len(strategies) != 2):
            raise InvalidConfig("A Match needs exactly 2 strategies, got {}.".format(len(strategies)))
        if (strategies[0] is strategies[1]):
            raise DuplicatePlayer("A strategy cannot play against itself; use copy() for a second instance.")
        self.strategies = strategies
        self.nrounds = check_rounds(nrounds)
        self.payoffs = payoffs
        self.history = OutcomeLog()
        self._play()
    @property
    def payoffs(self):
        return self._payoffs
    @payoffs.setter
    def payoffs(self, payoffs):
        """Replaces the payoff matrix; this only affects scores computed afterwards."""
        if (payoffs is not None) and (not isinstance(payoffs, PayoffMatrix)):
            payoffs = PayoffMatrix.from_sequence(payoffs)
        self._payoffs = payoffs
    def _play_round(self):
        # both choices are made against the history as of the end of the previous round
        choices = [strategy.decide(self.history, seat) for (seat, strategy) in zip(SEATS, self.strategies)]
        self.history.record_round(*choices)
    def _play(self):
        logger.debug('Playing %d rounds: %r vs. %r', self.nrounds, *self.strategies)
        for _ in range(self.nrounds):
            self._play_round()
        logger.debug('Match finished with events %s', self.history.event_histogram().tolist())
    def is_complete(self):
        return (self.history.round_count() == self.nrounds)
    def round_count(self):
        return self.history.round_count()
    def sequence_for_seat(self, seat):
        """Chronological tuple of choices made by the given seat."""
        return self.history.sequence_for_seat(seat)
    def event_histogram(self):
        """Counts of (coop, coop), (coop, compete), (compete, coop), (compete, compete)."""
        return self.history.event_histogram()
    def _require_payoffs(self):
        if (self._payoffs is None):
            raise PayoffsUnset("The payoffs are not set.")
        return self._payoffs
    def score_for_seat(self, seat):
        """Total payoff of the given seat over the Match."""
        payoffs = self._require_payoffs()
        return payoffs.scores(self.event_histogram())[check_seat(seat)]
    def scores(self):
        """Pair of total payoffs (seat 0, seat 1)."""
        return (self.score_for_seat(0), self.score_for_seat(1))
    def round_payoffs(self, seat):
        """Array of the payoffs received by the given seat in each round."""
        payoffs = self._require_payoffs()
        seat = check_seat(seat)
        return np.array([payoffs.payoff(choices)[seat] for choices in self.history], dtype = float)
    def cumulative_scores(self, seat):
        """Array of the running total payoff of the given seat after each round."""
        return np.cumsum(self.round_payoffs(seat))
    def winners(self):
        """Returns list of seats with the maximum total payoff."""
        scores = self.scores()
        max_score = max(scores)
        return [seat for (seat, score) in zip(SEATS, scores) if (score == max_score)]
    def labels(self):
        """Display names of the two strategies, suffixed with " (1)" and " (2)" if they coincide."""
        names = [strategy.name for strategy in self.strategies]
        if (names[0] == names[1]):
            names = ['{} ({})'.format(name, seat + 1) for (seat, name) in zip(SEATS, names)]
        return names
    def outcome_table(self):
        """Returns a DataFrame of the number of times each event occurred, rows indexed by seat 0's choice and columns by seat 1's."""
        mat = self.event_histogram().reshape((2, 2))
        df = pd.DataFrame(mat, index = CHOICE_NAMES, columns = CHOICE_NAMES)
        df.index.name = '{} \\ {}'.format(*self.labels())
        return df
    def plot_cumulative_scores(self, show = True):
        """Plots a graph of both seats' cumulative scores over the rounds."""
        lines = [plt.plot(np.arange(1, len(self) + 1), self.cumulative_scores(seat), marker = 'o', markersize = 4, alpha = 0.7)[0] for seat in SEATS]
        plt.legend(lines, self.labels())
        plt.title('Cumulative scores for "{}"\n{} rounds'.format(self._require_payoffs().name, self.nrounds), fontweight = 'bold', fontsize = 12)
        force_integer_xaxis()
        if show:
            plt.show()
        return lines
    def view_history(self, symbols = ('0', '1'), width = 50):
        """Returns the choices of both seats as text, width rounds per line."""
        labels = self.labels()
        label_width = max(len(label) for label in labels)
        sequences = [self.sequence_for_seat(seat) for seat in SEATS]
        s = ''
        for start in range(0, len(self), width):
            for (label, seq) in zip(labels, sequences):
                s += '{}: '.format(label.ljust(label_width))
                s += ''.join(symbols[int(choice)] for choice in seq[start : start + width]) + '\n'
            s += '\n'
        return s
    def __repr__(self):
        s = 'Match of {} rounds\n\nPlayers:\n'.format(self.nrounds)
        s += '\n'.join('{}: {!r}'.format(label, strategy) for (label, strategy) in zip(self.labels(), self.strategies))
        s += '\n\nEvents:\n{}'.format(self.outcome_table())
        if (self._payoffs is not None):
            s += '\n\nScores:\n' + '\n'.join('{}: {:g}'.format(label, score) for (label, score) in zip(self.labels(), self.scores()))
        return s
    def __len__(self):
        return self.history.round_count()

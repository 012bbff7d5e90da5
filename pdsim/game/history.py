import numpy as np
import pandas as pd

from pdsim.utils import check_seat

EVENT_NAMES = ('coop/coop', 'coop/compete', 'compete/coop', 'compete/compete')


def event_index(choice0, choice1):
    """Index of the event bucket for a round: 2 * choice0 + choice1."""
    return 2 * int(choice0) + int(choice1)

class OutcomeLog():
    """An append-only list of rounds, each a pair of choices (seat 0, seat 1), along with counts of each event seen thus far."""
    def __init__(self):
        self.clear()
    def clear(self):
        """Clears the log."""
        self._event_counts = np.zeros(4, dtype = int)
        self._sequences = ([], [])
    def record_round(self, choice0, choice1):
        """Adds a new round to the log."""
        (choice0, choice1) = (bool(choice0), bool(choice1))
        self._sequences[0].append(choice0)
        self._sequences[1].append(choice1)
        self._event_counts[event_index(choice0, choice1)] += 1
    def round_count(self):
        """Number of rounds recorded so far."""
        return len(self._sequences[0])
    def sequence_for_seat(self, seat):
        """Chronological tuple of the choices made by the player in the given seat."""
        return tuple(self._sequences[check_seat(seat)])
    def last_choice(self, seat):
        """Most recent choice of the given seat, or None if no round has been played."""
        seq = self._sequences[check_seat(seat)]
        return seq[-1] if seq else None
    def suffix(self, seat, start):
        """Choices of the given seat from round index start onward."""
        return tuple(self._sequences[check_seat(seat)][start:])
    def event_histogram(self):
        """Counts of (coop, coop), (coop, compete), (compete, coop), (compete, compete), in that order."""
        return self._event_counts.copy()
    def rounds(self):
        """Tuple of (choice0, choice1) pairs in chronological order."""
        return tuple(zip(*self._sequences))
    def __len__(self):
        return self.round_count()
    def __iter__(self):
        return iter(self.rounds())
    def __getitem__(self, i):
        return (self._sequences[0][i], self._sequences[1][i])
    def __repr__(self):
        counts = pd.Series(self._event_counts, index = EVENT_NAMES)
        s = 'History\n'
        for seat in (0, 1):
            s += ''.join(str(int(choice)) for choice in self._sequences[seat]) + '\n'
        if (len(self) > 0):
            s += '\n'
        s += 'Counts\n'
        s += '\n'.join(repr(counts).split('\n')[:-1])
        return s

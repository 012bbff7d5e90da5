"""Strategies for the repeated Prisoner's Dilemma, where each round both players choose to Cooperate or Compete:
    COOPERATE (False, 0)
    COMPETE (True, 1)
Every strategy receives the OutcomeLog of its Match and its own seat, so it can look at either player's past choices."""

import logging

from pdsim.game.errors import InvalidConfig
from pdsim.game.strategy import ConstantStrategy, StochasticStrategy, Strategy, StrategyParams
from pdsim.utils import check_positive_int, check_probability, opponent

logger = logging.getLogger(__name__)

COOPERATE = False
COMPETE = True


class AlwaysCooperate(ConstantStrategy):
    """Cooperates all the time."""
    def __init__(self, name = None):
        super().__init__(COOPERATE, name)

class AlwaysCompete(ConstantStrategy):
    """Competes all the time."""
    def __init__(self, name = None):
        super().__init__(COMPETE, name)

class RandomChoice(StochasticStrategy):
    """Cooperates randomly with probability p, otherwise competes."""
    PARAMS = StrategyParams(memory_depth = 0, stochastic = True)
    def __init__(self, p = 0.5, name = None, seed = None):
        super().__init__(name, seed)
        self.p = check_probability(p, 'p')
    def decide(self, history, seat):
        return COOPERATE if (self.draw() < self.p) else COMPETE

class TitForTatWindow(Strategy):
    """Competes for tits_length rounds after the opponent has competed tats_needed times in a row, otherwise cooperates.
    Only the last tats_needed + tits_length - 1 rounds of the opponent are scanned, so a run of competes is remembered until it slides out of that window.
    With the defaults (1, 1) this is plain Tit for Tat: cooperate first, then copy the opponent's last choice."""
    def __init__(self, tats_needed = 1, tits_length = 1, name = None):
        super().__init__(name)
        self.tats_needed = check_positive_int(tats_needed, 'tats_needed')
        self.tits_length = check_positive_int(tits_length, 'tits_length')
        self.PARAMS = StrategyParams(memory_depth = self.window)
    @property
    def window(self):
        """Number of the opponent's most recent choices that are scanned."""
        return self.tats_needed + self.tits_length - 1
    def decide(self, history, seat):
        start = max(0, history.round_count() - self.window)
        run = 0
        for choice in history.suffix(opponent(seat), start):
            if choice:
                run += 1
                if (run == self.tats_needed):
                    return COMPETE
            else:
                run = 0
        return COOPERATE

class Grudger(Strategy):
    """Cooperates until the opponent competes once, then competes forever.
    Equivalent to TitForTatWindow with tats_needed = 1 and an infinite tits_length."""
    PARAMS = StrategyParams(memory_depth = 1)
    def __init__(self, name = None):
        super().__init__(name)
        self.triggered = False
    def decide(self, history, seat):
        if self.triggered:
            return COMPETE
        last = history.last_choice(opponent(seat))
        if (last is None) or (last == COOPERATE):
            return COOPERATE
        self.triggered = True
        logger.debug('%s holds a grudge from round %d on', self.name, history.round_count())
        return COMPETE
    def __repr__(self):
        s = super().__repr__()
        return (s + ' [triggered]') if self.triggered else s

class ProbabilisticReactive(StochasticStrategy):
    """Behaves like Tit for Tat but competes outright with a fixed probability each round (Joss)."""
    PARAMS = StrategyParams(memory_depth = 1, stochastic = True)
    def __init__(self, compete_probability = 0.2, name = None, seed = None):
        super().__init__(name, seed)
        self.compete_probability = check_probability(compete_probability, 'compete_probability')
    def decide(self, history, seat):
        if (self.draw() < self.compete_probability):
            return COMPETE
        last = history.last_choice(opponent(seat))
        return COOPERATE if (last is None) else last

Joss = ProbabilisticReactive

# strategies by the names accepted on the command line
STRATEGIES = {
    'cooperate': AlwaysCooperate,
    'compete': AlwaysCompete,
    'random': RandomChoice,
    'tft': TitForTatWindow,
    'grudger': Grudger,
    'joss': ProbabilisticReactive,
}

def _parse_number(s):
    try:
        return int(s)
    except ValueError:
        return float(s)

def parse_strategy(spec, name = None, seed = None):
    """Builds a Strategy from a string of the form 'kind' or 'kind:arg,arg', e.g. 'tft:2,3' or 'random:0.7'.
    kind is one of the keys of STRATEGIES; the arguments are passed positionally to its constructor."""
    (kind, _, argstr) = spec.partition(':')
    kind = kind.strip().lower()
    if (kind not in STRATEGIES):
        raise InvalidConfig("Unknown strategy {!r} (choose from {}).".format(kind, ', '.join(STRATEGIES)))
    try:
        args = [_parse_number(arg) for arg in argstr.split(',')] if argstr.strip() else []
    except ValueError:
        raise InvalidConfig("Invalid arguments for strategy {!r}: {!r}".format(kind, argstr))
    cls = STRATEGIES[kind]
    kwargs = {'name' : name}
    if issubclass(cls, StochasticStrategy):
        kwargs['seed'] = seed
    try:
        return cls(*args, **kwargs)
    except TypeError:
        raise InvalidConfig("Too many arguments for strategy {!r}: {!r}".format(kind, argstr))

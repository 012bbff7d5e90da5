import abc
from copy import deepcopy
import inspect
import numpy as np



class StrategyParams():
    """A bundle of parameters describing the type of strategy (e.g. complexity criteria)."""
    DEFAULT_PARAMS = {
            'memory_depth': np.inf,  # number of rounds into the past that can be used
            'stochastic': False,  # strategy can use randomness
        }
    def __init__(self, **kwargs):
        """Initialize from keyword arguments."""
        self.__dict__.update(StrategyParams.DEFAULT_PARAMS)
        self.__dict__.update(kwargs)
    @property
    def depends_on_history(self):
        return (self.memory_depth > 0)
    def is_basic(self):
        return (not self.stochastic) and (self.memory_depth in (0, 1))
    def __repr__(self):
        return str(self.__dict__)

class Strategy(abc.ABC):
    """A Strategy is a function that, given the history of a Match and the seat it occupies, returns a choice (False to cooperate, True to compete). It may keep private state, which only its own decisions can change."""
    PARAMS = StrategyParams()  # bundle of parameters
    def __init__(self, name = None):
        """name is the display name (defaults to the class name)."""
        self.name = self.__class__.__name__ if (name is None) else str(name)
    @abc.abstractmethod
    def decide(self, history, seat):
        """Makes the choice for the next round.
        history exposes round_count() and sequence_for_seat(seat) for the rounds played so far.
        seat is 0 or 1, the seat of the player using this strategy."""
    def copy(self):
        """Returns a Strategy with the same configuration and independent state."""
        return deepcopy(self)
    def config(self):
        """Dictionary of the constructor arguments (other than name) and their current values."""
        args = inspect.getfullargspec(self.__init__).args[1:]
        return {arg : getattr(self, arg) for arg in args if (arg != 'name')}
    def __repr__(self):
        args = ', '.join('{} = {}'.format(arg, val) for (arg, val) in self.config().items())
        s = "{}({})".format(self.__class__.__name__, args)
        if (self.name != self.__class__.__name__):
            s = '{}: {}'.format(self.name, s)
        return s

class ConstantStrategy(Strategy):
    """Plays a fixed choice no matter what."""
    PARAMS = StrategyParams(memory_depth = 0)
    def __init__(self, choice, name = None):
        super().__init__(name)
        self.choice = bool(choice)
    def decide(self, history, seat):
        return self.choice

class StochasticStrategy(Strategy):
    """Base for strategies that draw uniform random numbers from their own generator.
    seed seeds the generator; None draws fresh entropy. A copy continues from the same generator state."""
    PARAMS = StrategyParams(stochastic = True)
    def __init__(self, name = None, seed = None):
        super().__init__(name)
        self.seed = seed
        self.rng = np.random.default_rng(seed)
    def draw(self):
        """Uniform draw from [0, 1)."""
        return self.rng.random()
    def spawn(self, seed):
        """Returns a copy whose generator is reseeded with the given seed."""
        strategy = self.copy()
        strategy.seed = seed
        strategy.rng = np.random.default_rng(seed)
        return strategy

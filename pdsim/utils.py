import numpy as np

from pdsim.game.errors import InvalidConfig, InvalidSeat

SEATS = (0, 1)

##############
# VALIDATION #
##############

def check_seat(seat):
    """Returns the seat if it is 0 or 1, otherwise raises InvalidSeat."""
    if isinstance(seat, bool) or (not isinstance(seat, (int, np.integer))) or (seat not in SEATS):
        raise InvalidSeat("Seat must be 0 or 1, got {!r}.".format(seat))
    return int(seat)

def check_probability(p, name = 'p'):
    """Returns p as a float if it lies in [0, 1], otherwise raises InvalidConfig."""
    try:
        p = float(p)
    except (TypeError, ValueError):
        raise InvalidConfig("{} must be a number, got {!r}.".format(name, p))
    if (not (0.0 <= p <= 1.0)):
        raise InvalidConfig("{} must be in [0, 1], got {}.".format(name, p))
    return p

def check_positive_int(n, name):
    """Returns n if it is a positive integer, otherwise raises InvalidConfig."""
    if isinstance(n, bool) or (not isinstance(n, (int, np.integer))) or (n <= 0):
        raise InvalidConfig("{} must be a positive integer, got {!r}.".format(name, n))
    return int(n)

def opponent(seat):
    """Returns the seat index of the other player."""
    return 1 - check_seat(seat)

def check_rounds(n):
    """Returns n if it is a non-negative integer, otherwise raises InvalidConfig."""
    if isinstance(n, bool) or (not isinstance(n, (int, np.integer))) or (n < 0):
        raise InvalidConfig("Number of rounds must be a non-negative integer, got {!r}.".format(n))
    return int(n)

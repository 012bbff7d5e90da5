"""Exceptions raised by the simulation core for invalid caller input."""


class InvalidConfig(ValueError):
    """A strategy, match or tournament was constructed with invalid parameters."""

class DuplicatePlayer(ValueError):
    """The same Strategy instance was seated on both sides of a Match."""

class InvalidSeat(ValueError):
    """A seat index other than 0 or 1 was given."""

class PayoffsUnset(RuntimeError):
    """A score was requested from a Match that has no PayoffMatrix."""

"""
Error taxonomy for the simulation core.

Only construction problems and driver bugs are exceptions. Invalid input
and self-collision are expected turn outcomes and are returned as values
(see ``simulation.TurnStatus``).
"""


class SnakeSimError(Exception):
    """Base class for simulation errors."""


class InvalidConfiguration(SnakeSimError, ValueError):
    """Board size, snake size or an explicit body is not usable."""


class EmptyBody(SnakeSimError, RuntimeError):
    """A snake was asked for its head while holding no segments."""


class SimulationTerminated(SnakeSimError, RuntimeError):
    """A move was issued to a snake that has already collided."""

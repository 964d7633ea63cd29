"""
Exceptions raised by the playoff simulator.
"""


class SimulationError(Exception):
    """Base class for simulator errors."""
    pass


class InvalidSettingsError(SimulationError, ValueError):
    """Raised when league settings cannot describe a valid season."""
    pass


class InvalidTeamError(SimulationError, ValueError):
    """Raised when a team's standings or schedule are malformed."""
    pass


class RandomSourceError(SimulationError):
    """Raised when the random source fails or returns a value outside [0, 1)."""
    pass

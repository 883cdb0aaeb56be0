class GravsimError(Exception):
    """Base class for errors raised by gravsim."""


class InvalidBodyError(GravsimError, ValueError):
    """Raised when a body would enter the simulation with unusable state."""

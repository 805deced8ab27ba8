"""
Exceptions raised by the atmosphere layer.

All inherit from AtmosphereError. The configuration errors are also
ValueErrors so callers that already catch ValueError keep working.
"""


class AtmosphereError(Exception):
    """Base class for atmosphere-layer errors."""


class InvalidBranchError(AtmosphereError, ValueError):
    """Unrecognised branch selector passed to the complex wavenumber solver."""


class InvalidFormulationError(AtmosphereError, ValueError):
    """Unrecognised coefficient formulation."""


class AtmosphereConfigError(AtmosphereError, ValueError):
    """Malformed atmosphere configuration file."""


class CutoffOrderingError(AtmosphereError, ArithmeticError):
    """Cutoff frequencies came out with ω_hi < ω_lo (or NaN)."""

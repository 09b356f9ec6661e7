"""
Engine error types.

All derive from ValueError so callers (and the API layer) can treat them as
bad-input conditions. Degenerate numeric cases are not errors: they resolve
to 0 inside the engine.
"""


class MalformedInputError(ValueError):
    """Weather or load text yielded no usable records."""


class InsufficientDataError(ValueError):
    """Simulation requested without equipment or without a full 8760 h series."""


class UnknownRegionError(ValueError):
    """Region name not present in the climate table."""


class UnknownProfileError(ValueError):
    """Standard load profile name not present in the profile table."""


class NarrativeError(RuntimeError):
    """The external narrative generator failed or returned nothing."""

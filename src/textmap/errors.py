class TextmapError(Exception):
    """Base class for errors raised by textmap."""


class ConfigurationError(TextmapError, ValueError):
    """Caller-supplied options are structurally invalid."""


class InternalInvariantViolation(TextmapError, RuntimeError):
    """A pipeline stage produced data that breaks its own contract (a bug)."""

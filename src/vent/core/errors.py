"""Error types shared across vent."""


class VentError(Exception):
    """Base class for all vent errors."""


class InvalidInputError(VentError):
    """Bad user input: empty message, bad or out-of-range message ID."""


class MalformedRecordError(VentError):
    """A stored line could not be decoded into an entry."""


class HelperError(VentError):
    """A template helper was invoked incorrectly."""


class RenderError(VentError):
    """Rendering failed. The underlying error is available as __cause__."""

class CalchinaError(Exception):
    """Base error."""

class InvalidChineseDateError(CalchinaError, ValueError):
    """Raised by a backend for a (cycle, year, month, day) that does not exist."""

class BackendUnavailableError(CalchinaError):
    """Raised when a backend cannot serve the requested range or a host hook is missing."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UpstreamError(Exception):
    """Raised when an external dependency fails or a request body cannot be parsed."""


class CalendarFeedError(UpstreamError):
    """Raised when a worker's calendar feed cannot be fetched or parsed."""


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing."""

"""Custom exceptions for the telemetry pipeline."""


class TelemetryException(Exception):
    """Base exception for all telemetry errors."""

    def __init__(self, message: str, details: dict | None = None):
        """
        Initialize telemetry exception.

        Args:
            message: Human-readable error message
            details: Optional dict with additional error context
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundException(TelemetryException):
    """Raised when a requested resource is not found."""

    pass


class SiteNotFoundError(ResourceNotFoundException):
    """Raised when a monitoring site is not found."""

    def __init__(self, site_id: str):
        super().__init__(message=f"Monitoring site {site_id} not found", details={"site_id": site_id})


class MalformedEventError(TelemetryException):
    """Raised when a real-time payload cannot be parsed into an event."""

    pass

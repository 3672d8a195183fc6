"""Exception hierarchy for the Trusted Application SDK."""

from typing import Any, Dict, Optional


class PlatformServiceError(Exception):
    """Base exception class for platform service errors."""
    def __init__(self, message: str, error_code: str = "PLATFORM_ERROR", details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(PlatformServiceError, ValueError):
    """Exception for a null or invalid caller-supplied argument."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "INVALID_ARGUMENT", details)


class CapabilityNotAvailableError(PlatformServiceError):
    """Exception for an operation whose backing relation is not advertised."""
    def __init__(self, capability: str, details: Optional[Dict[str, Any]] = None):
        self.capability = capability
        super().__init__(f"Capability '{capability}' is not available", "CAPABILITY_NOT_AVAILABLE", details)


class LinkNotFoundError(PlatformServiceError, KeyError):
    """Exception for a lookup of a relation that is not in the link registry."""
    def __init__(self, relation: str, details: Optional[Dict[str, Any]] = None):
        self.relation = relation
        super().__init__(f"Link '{relation}' not found", "LINK_NOT_FOUND", details)

    def __str__(self) -> str:
        return self.message


class RemoteServiceError(PlatformServiceError):
    """Exception for an unsuccessful or structurally invalid server response."""
    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.url = url
        self.operation = operation
        self.status_code = status_code
        merged = {"url": url, "operation": operation, "status_code": status_code}
        merged.update(details or {})
        super().__init__(message, "REMOTE_SERVICE_ERROR", merged)


class TransportError(PlatformServiceError):
    """Exception raised by the transport when a request could not be completed."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "TRANSPORT_ERROR", details)

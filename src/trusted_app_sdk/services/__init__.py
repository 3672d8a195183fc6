# Services package
# Link registry, capability gating, transport, logging and errors

from .capabilities import ApplicationCapability, CapabilityGate, CommunicationCapability
from .errors import (
    CapabilityNotAvailableError,
    InvalidArgumentError,
    LinkNotFoundError,
    PlatformServiceError,
    RemoteServiceError,
    TransportError,
)
from .link_registry import LinkRegistry
from .logging_context import LoggingContext
from .transport import HttpxRestfulClient, RestfulClient, RestfulResponse

__all__ = [
    "ApplicationCapability",
    "CapabilityGate",
    "CapabilityNotAvailableError",
    "CommunicationCapability",
    "HttpxRestfulClient",
    "InvalidArgumentError",
    "LinkNotFoundError",
    "LinkRegistry",
    "LoggingContext",
    "PlatformServiceError",
    "RemoteServiceError",
    "RestfulClient",
    "RestfulResponse",
    "TransportError",
]

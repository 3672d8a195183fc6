# Models package
# Pydantic wire models for platform payloads

from .links import LinkDescriptor
from .resources import (
    AdhocMeetingDocument,
    AdhocMeetingInput,
    AnonymousApplicationTokenDocument,
    AnonymousApplicationTokenInput,
    ApplicationDocument,
    ApplicationEntry,
    ApplicationsDocument,
    CommunicationDocument,
    DiscoverDocument,
    ResourceDocument,
)

__all__ = [
    "AdhocMeetingDocument",
    "AdhocMeetingInput",
    "AnonymousApplicationTokenDocument",
    "AnonymousApplicationTokenInput",
    "ApplicationDocument",
    "ApplicationEntry",
    "ApplicationsDocument",
    "CommunicationDocument",
    "DiscoverDocument",
    "LinkDescriptor",
    "ResourceDocument",
]

# Resource document models
# Wire shapes for platform payloads and operation inputs

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .links import LinkDescriptor


class PlatformModel(BaseModel):
    """Base model using the platform's camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


class ResourceDocument(PlatformModel):
    """Common shape of every resource payload."""

    links: list[LinkDescriptor] = Field(
        default_factory=list, description="Relations advertised by the resource"
    )
    embedded: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Sub-resources delivered inline"
    )


class DiscoverDocument(ResourceDocument):
    """Discovery document; the entry point of the resource graph."""


class ApplicationEntry(PlatformModel):
    """One application listed by the applications collection."""

    endpoint_id: str = Field(..., min_length=1, description="Endpoint identity")
    links: list[LinkDescriptor] = Field(default_factory=list)


class ApplicationsDocument(ResourceDocument):
    """Applications collection payload."""

    applications: list[ApplicationEntry] = Field(default_factory=list)


class ApplicationDocument(ResourceDocument):
    """Application payload; carries the embedded communication resource."""


class CommunicationDocument(ResourceDocument):
    """Communication payload, normally delivered embedded in the application."""


class AnonymousApplicationTokenInput(PlatformModel):
    """Request body for issuing an anonymous application token."""

    allowed_origins: str | None = None
    application_session_id: str | None = None
    meeting_url: str | None = None


class AnonymousApplicationTokenDocument(ResourceDocument):
    """Anonymous application token payload."""

    auth_token: str = Field(..., min_length=1)
    auth_token_expiry_time: datetime
    anonymous_meeting_join_url: str | None = None


class AdhocMeetingInput(PlatformModel):
    """Request body for creating an ad-hoc meeting."""

    subject: str | None = None
    description: str | None = None
    access_level: str | None = None
    callback_context: str | None = None


class AdhocMeetingDocument(ResourceDocument):
    """Ad-hoc meeting payload."""

    online_meeting_uri: str = Field(..., min_length=1)
    join_url: str = Field(..., min_length=1)
    subject: str | None = None
    description: str | None = None
    access_level: str | None = None
    expiration_time: datetime | None = None

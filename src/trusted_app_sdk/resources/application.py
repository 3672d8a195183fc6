"""Application resource and its capability-gated operations."""

from typing import Optional

from ..models.resources import (
    AdhocMeetingInput,
    AnonymousApplicationTokenInput,
    ApplicationDocument,
)
from ..services.capabilities import APPLICATION_RELATIONS, ApplicationCapability, CapabilityGate
from ..services.logging_context import LoggingContext
from .base import PlatformResource
from .communication import Communication
from .results import AdhocMeetingResource, AnonymousApplicationTokenResource


class Application(PlatformResource):
    """The application bound to the caller's endpoint identity.

    ``communication`` stays None until ``refresh_and_initialize`` succeeds;
    a payload without the embedded communication resource fails
    initialization with RemoteServiceError.
    """

    document_model = ApplicationDocument
    capability_gate = CapabilityGate(APPLICATION_RELATIONS)
    embedded_resources = {"communication": Communication}

    def __init__(self, restful_client, resource_url: str, endpoint_identity: Optional[str] = None) -> None:
        super().__init__(restful_client, resource_url)
        self.endpoint_identity = endpoint_identity
        self.communication: Optional[Communication] = None

    async def get_anon_application_token(
        self,
        logging_context: Optional[LoggingContext],
        token_input: Optional[AnonymousApplicationTokenInput],
    ) -> AnonymousApplicationTokenResource:
        """Issue an anonymous application token."""
        return await self._invoke_capability(
            ApplicationCapability.GET_ANON_APPLICATION_TOKEN,
            token_input,
            AnonymousApplicationTokenResource,
            logging_context,
        )

    async def get_adhoc_meeting_resource(
        self,
        logging_context: Optional[LoggingContext],
        meeting_input: Optional[AdhocMeetingInput],
    ) -> AdhocMeetingResource:
        """Create an ad-hoc meeting."""
        return await self._invoke_capability(
            ApplicationCapability.GET_ADHOC_MEETING_RESOURCE,
            meeting_input,
            AdhocMeetingResource,
            logging_context,
        )

"""Discover resource: entry point of the platform resource graph."""

from typing import Any, Dict, Optional

from ..models.resources import DiscoverDocument, ResourceDocument
from ..services.errors import InvalidArgumentError, RemoteServiceError
from ..services.link_registry import LinkRegistry
from ..services.logging_context import LoggingContext
from .applications import Applications
from .base import PlatformResource

APPLICATIONS_RELATION = "applications"


class Discover(PlatformResource):
    """Discovery document; resolves the applications collection."""

    document_model = DiscoverDocument

    def __init__(self, restful_client, resource_url: str) -> None:
        super().__init__(restful_client, resource_url)
        self.endpoint_identity: Optional[str] = None
        self.applications: Optional[Applications] = None
        self._requested_identity: Optional[str] = None

    async def refresh_and_initialize(
        self,
        logging_context: Optional[LoggingContext] = None,
        endpoint_identity: Optional[str] = None,
    ) -> None:
        """Fetch the discovery document and bind Applications to endpoint_identity.

        A previously bound identity is reused when none is passed.
        """
        identity = endpoint_identity or self.endpoint_identity
        if not identity:
            raise InvalidArgumentError("endpoint_identity must not be empty")
        self._requested_identity = identity
        await super().refresh_and_initialize(logging_context)

    async def _initialize(
        self,
        links: LinkRegistry,
        document: ResourceDocument,
        logging_context: Optional[LoggingContext],
    ) -> Dict[str, Any]:
        staged = await super()._initialize(links, document, logging_context)
        if not links.has(APPLICATIONS_RELATION):
            raise RemoteServiceError(
                "Discovery document has no applications link",
                url=self.resource_url,
                operation="refresh_and_initialize",
            )
        staged["endpoint_identity"] = self._requested_identity
        staged["applications"] = Applications(
            self.restful_client, links.url_for(APPLICATIONS_RELATION), self._requested_identity
        )
        return staged

"""Applications collection resource."""

import logging
from typing import Any, Dict, Optional

from ..models.resources import ApplicationsDocument, ResourceDocument
from ..services.errors import RemoteServiceError
from ..services.link_registry import LinkRegistry
from ..services.logging_context import LoggingContext, record
from .application import Application
from .base import PlatformResource

logger = logging.getLogger(__name__)


class Applications(PlatformResource):
    """Collection of applications; selects the one for the bound endpoint."""

    document_model = ApplicationsDocument

    def __init__(self, restful_client, resource_url: str, endpoint_identity: str) -> None:
        super().__init__(restful_client, resource_url)
        self.endpoint_identity = endpoint_identity
        self.application: Optional[Application] = None

    async def _initialize(
        self,
        links: LinkRegistry,
        document: ResourceDocument,
        logging_context: Optional[LoggingContext],
    ) -> Dict[str, Any]:
        staged = await super()._initialize(links, document, logging_context)

        entry = next(
            (e for e in document.applications if e.endpoint_id == self.endpoint_identity),
            None,
        )
        if entry is None:
            raise RemoteServiceError(
                f"No application found for endpoint {self.endpoint_identity}",
                url=self.resource_url,
                operation="refresh_and_initialize",
                details={"endpoint_identity": self.endpoint_identity},
            )

        entry_links = LinkRegistry.from_descriptors(entry.links, self.resource_url)
        if not entry_links.has("self"):
            raise RemoteServiceError(
                f"Application entry for {self.endpoint_identity} has no self link",
                url=self.resource_url,
                operation="refresh_and_initialize",
            )

        application_url = entry_links.url_for("self")
        record(logger, logging_context, f"Selected application {application_url} for {self.endpoint_identity}")
        if self.application is not None and self.application.resource_url == application_url:
            staged["application"] = self.application
        else:
            staged["application"] = Application(self.restful_client, application_url, self.endpoint_identity)
        return staged

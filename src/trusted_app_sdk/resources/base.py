"""Base class for hypermedia platform resources.

A resource wraps the link registry and parsed document of its latest
successful fetch. ``refresh`` replaces both in one step once the fetch and
parse succeed. ``refresh_and_initialize`` additionally resolves the
sub-resources the resource type requires to be embedded in its payload;
those are staged first and only committed together with the new snapshot.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Set, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..models.resources import ResourceDocument
from ..services.capabilities import CapabilityGate
from ..services.errors import (
    CapabilityNotAvailableError,
    InvalidArgumentError,
    RemoteServiceError,
)
from ..services.link_registry import LinkRegistry
from ..services.logging_context import LoggingContext, record
from ..services.transport import RestfulClient, RestfulResponse

logger = logging.getLogger(__name__)

ResourceT = TypeVar("ResourceT", bound="PlatformResource")
DocumentT = TypeVar("DocumentT", bound=BaseModel)


class ResourceState(Enum):
    """Lifecycle of a resource instance."""
    UNINITIALIZED = "uninitialized"
    REFRESHED = "refreshed"
    INITIALIZED = "initialized"


def parse_document(
    response: RestfulResponse, model: Type[DocumentT], operation: str
) -> DocumentT:
    """Validate a response into a document model or raise RemoteServiceError."""
    if not response.is_success:
        raise RemoteServiceError(
            f"{operation} failed with HTTP {response.status_code}",
            url=response.url,
            operation=operation,
            status_code=response.status_code,
            details={"body": response.text},
        )
    if not isinstance(response.body, dict):
        raise RemoteServiceError(
            f"{operation} returned a body that is not a JSON object",
            url=response.url,
            operation=operation,
            status_code=response.status_code,
        )
    try:
        return model.model_validate(response.body)
    except ValidationError as e:
        raise RemoteServiceError(
            f"{operation} returned a malformed {model.__name__}: {e.error_count()} validation error(s)",
            url=response.url,
            operation=operation,
            status_code=response.status_code,
            details={"errors": e.errors(include_url=False)},
        ) from e


class PlatformResource:
    """Common refresh, initialize and capability behavior."""

    document_model: Type[ResourceDocument] = ResourceDocument
    capability_gate: CapabilityGate = CapabilityGate()
    # name -> resource class of sub-resources that must be embedded
    embedded_resources: Dict[str, Type["PlatformResource"]] = {}

    def __init__(self, restful_client: RestfulClient, resource_url: Optional[str]) -> None:
        self.restful_client = restful_client
        self.resource_url = resource_url
        self.state = ResourceState.UNINITIALIZED
        self._links: Optional[LinkRegistry] = None
        self._document: Optional[ResourceDocument] = None

    @property
    def links(self) -> LinkRegistry:
        """Link registry of the last successful fetch (empty before one)."""
        return self._links if self._links is not None else LinkRegistry()

    @property
    def document(self) -> Optional[ResourceDocument]:
        return self._document

    @classmethod
    def from_document(
        cls: Type[ResourceT],
        restful_client: RestfulClient,
        base_url: str,
        document: ResourceDocument,
    ) -> ResourceT:
        """Create a resource whose first snapshot is an already parsed document.

        Relative hrefs resolve against base_url. Without a self link the
        resource has no URL of its own and cannot be refreshed.
        """
        links = LinkRegistry.from_descriptors(document.links, base_url)
        resource_url = links.url_for("self") if links.has("self") else None
        resource = cls(restful_client, resource_url)
        resource._commit(links, document)
        return resource

    def supports(self, capability: Enum) -> bool:
        """Whether the capability's relation is in the current link registry."""
        return self.capability_gate.supports(self._links, capability)

    def supported_capabilities(self) -> Set[Enum]:
        return self.capability_gate.supported(self._links)

    async def refresh(self, logging_context: Optional[LoggingContext] = None) -> None:
        links, document = await self._fetch(logging_context)
        self._commit(links, document)

    async def refresh_and_initialize(self, logging_context: Optional[LoggingContext] = None) -> None:
        links, document = await self._fetch(logging_context)
        staged = await self._initialize(links, document, logging_context)
        self._commit(links, document)
        for name, value in staged.items():
            setattr(self, name, value)
        self.state = ResourceState.INITIALIZED
        record(logger, logging_context, f"Initialized {type(self).__name__} at {self.resource_url}")

    async def _fetch(self, logging_context: Optional[LoggingContext]) -> tuple[LinkRegistry, ResourceDocument]:
        if self.resource_url is None:
            raise RemoteServiceError(
                f"{type(self).__name__} has no self link to refresh from",
                operation=f"GET {type(self).__name__}",
            )
        response = await self.restful_client.submit("GET", self.resource_url, logging_context=logging_context)
        document = parse_document(response, self.document_model, f"GET {type(self).__name__}")
        return LinkRegistry.from_descriptors(document.links, self.resource_url), document

    def _commit(self, links: LinkRegistry, document: ResourceDocument) -> None:
        self._links = links
        self._document = document
        if self.state is ResourceState.UNINITIALIZED:
            self.state = ResourceState.REFRESHED

    async def _initialize(
        self,
        links: LinkRegistry,
        document: ResourceDocument,
        logging_context: Optional[LoggingContext],
    ) -> Dict[str, Any]:
        """Stage the attributes set by a successful initialization.

        The default resolves ``embedded_resources`` in declaration order and
        fails if any of them is missing from the payload.
        """
        staged: Dict[str, Any] = {}
        for name, resource_cls in self.embedded_resources.items():
            payload = document.embedded.get(name)
            if payload is None:
                raise RemoteServiceError(
                    f"{name.capitalize()} resource is not embedded in {type(self).__name__}",
                    url=self.resource_url,
                    operation="refresh_and_initialize",
                    details={"embedded": name},
                )
            try:
                embedded_document = resource_cls.document_model.model_validate(payload)
            except ValidationError as e:
                raise RemoteServiceError(
                    f"Embedded {name} resource is malformed",
                    url=self.resource_url,
                    operation="refresh_and_initialize",
                    details={"embedded": name, "errors": e.errors(include_url=False)},
                ) from e
            staged[name] = resource_cls.from_document(self.restful_client, self.resource_url, embedded_document)
            record(logger, logging_context, f"Resolved embedded {name} of {type(self).__name__}")
        return staged

    async def _invoke_capability(
        self,
        capability: Enum,
        input_model: Optional[BaseModel],
        result_cls: Type[ResourceT],
        logging_context: Optional[LoggingContext],
    ) -> ResourceT:
        """Submit input to the relation backing a capability and wrap the result.

        The request uses the method the relation advertises.
        """
        if input_model is None:
            raise InvalidArgumentError(
                f"Input for {capability.value} must not be None",
                {"capability": capability.value},
            )
        if not self.supports(capability):
            raise CapabilityNotAvailableError(
                capability.value, {"resource_url": self.resource_url}
            )

        relation = self.capability_gate.relation_for(capability)
        url = self.links.url_for(relation)
        method = self.links.method_for(relation)
        body = input_model.model_dump(by_alias=True, exclude_none=True, mode="json")
        record(logger, logging_context, f"Invoking {capability.value}: {method} {url}")

        response = await self.restful_client.submit(method, url, body=body, logging_context=logging_context)
        document = parse_document(response, result_cls.document_model, capability.value)
        return result_cls.from_document(self.restful_client, url, document)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.resource_url!r}, state={self.state.value})"

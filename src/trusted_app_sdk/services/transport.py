"""Request transport used by platform resources."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import httpx

from .errors import TransportError
from .logging_context import LoggingContext, record

logger = logging.getLogger(__name__)


@dataclass
class RestfulResponse:
    """Status and parsed JSON body of one request.

    ``body`` is None when the response carried no parseable JSON.
    """
    status_code: int
    url: str
    body: Any = None
    text: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class RestfulClient(Protocol):
    """Submit a request and return a structured response."""

    async def submit(
        self,
        method: str,
        url: str,
        body: Optional[dict[str, Any]] = None,
        logging_context: Optional[LoggingContext] = None,
    ) -> RestfulResponse:
        ...


class HttpxRestfulClient:
    """RestfulClient backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "Trusted-Application-SDK/0.1.0",
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        default_headers = {"User-Agent": user_agent, "Accept": "application/json"}
        default_headers.update(headers or {})
        self.client = httpx.AsyncClient(
            timeout=timeout,
            headers=default_headers,
            transport=transport,
        )

    async def submit(
        self,
        method: str,
        url: str,
        body: Optional[dict[str, Any]] = None,
        logging_context: Optional[LoggingContext] = None,
    ) -> RestfulResponse:
        record(logger, logging_context, f"{method} {url}")
        try:
            response = await self.client.request(method, url, json=body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(f"Transport failure for {method} {url}: {e}")
            raise TransportError(f"{method} {url} failed: {e}", {"url": url, "method": method}) from e

        try:
            parsed = response.json() if response.content else None
        except ValueError:
            parsed = None

        record(logger, logging_context, f"{method} {url} -> {response.status_code}")
        return RestfulResponse(
            status_code=response.status_code,
            url=str(response.url),
            body=parsed,
            text=response.text,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "HttpxRestfulClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

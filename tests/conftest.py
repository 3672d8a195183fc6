"""
Test configuration and shared fixtures for the Trusted Application SDK tests.

Resources are exercised against MockRestfulClient, which serves canned JSON
documents from tests/data and records every request it processes.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest
import pytest_asyncio

from trusted_app_sdk.resources import Application, Discover
from trusted_app_sdk.services.logging_context import LoggingContext
from trusted_app_sdk.services.transport import RestfulResponse

DATA_DIR = Path(__file__).parent / "data"

ENDPOINT_ID = "sip:trusted_app@contoso.example"


class DataUrls:
    """Absolute URLs served by MockRestfulClient."""

    BASE = "https://api.contoso.example"
    Discover = f"{BASE}/platformservice/discover"
    Applications = f"{BASE}/platformservice/v1/applications"
    Application = f"{BASE}/platformservice/v1/applications/2437512037"
    Communication = f"{Application}/communication"
    AnonToken = f"{Application}/anonApplicationTokens"
    AdhocMeeting = f"{Application}/adhocMeetings"


DEFAULT_RESPONSES: Dict[Tuple[str, str], Tuple[int, str]] = {
    (DataUrls.Discover, "GET"): (200, "Discover.json"),
    (DataUrls.Applications, "GET"): (200, "Applications.json"),
    (DataUrls.Application, "GET"): (200, "Application.json"),
    (DataUrls.AnonToken, "POST"): (200, "AnonApplicationToken.json"),
    (DataUrls.AdhocMeeting, "POST"): (200, "AdhocMeeting.json"),
}


class MockRestfulClient:
    """In-memory RestfulClient serving files from tests/data."""

    def __init__(self) -> None:
        self._responses = dict(DEFAULT_RESPONSES)
        self._failures: Dict[Tuple[str, str], Exception] = {}
        self.requests: List[str] = []
        self.bodies: List[Optional[Dict[str, Any]]] = []

    def override_response(self, url: str, method: str, status_code: int, filename: Optional[str]) -> None:
        self._responses[(url, method.upper())] = (status_code, filename)

    def fail_with(self, url: str, method: str, error: Exception) -> None:
        self._failures[(url, method.upper())] = error

    def requests_processed(self, request: str) -> bool:
        return request in self.requests

    def request_count(self, request: str) -> int:
        return self.requests.count(request)

    async def submit(self, method, url, body=None, logging_context=None) -> RestfulResponse:
        key = (url, method.upper())
        self.requests.append(f"{method.upper()} {url}")
        self.bodies.append(body)

        if key in self._failures:
            raise self._failures[key]

        status_code, filename = self._responses.get(key, (404, None))
        if filename is None:
            return RestfulResponse(status_code=status_code, url=url)

        text = (DATA_DIR / filename).read_text()
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
        return RestfulResponse(status_code=status_code, url=url, body=parsed, text=text)


@pytest.fixture
def restful_client():
    """Fresh mock transport for each test"""
    return MockRestfulClient()


@pytest.fixture
def logging_context():
    return LoggingContext(job_id="tests")


@pytest.fixture
def discover(restful_client):
    """Discover resource bound to the mock discovery URL"""
    return Discover(restful_client, DataUrls.Discover)


@pytest_asyncio.fixture
async def application(discover, logging_context) -> Application:
    """Application resolved through Discover and Applications, not yet fetched"""
    await discover.refresh_and_initialize(logging_context, ENDPOINT_ID)
    await discover.applications.refresh_and_initialize(logging_context)
    return discover.applications.application


@pytest_asyncio.fixture
async def initialized_application(application, logging_context) -> Application:
    await application.refresh_and_initialize(logging_context)
    return application

"""Walk the discovery chain from settings to an initialized application."""

import logging
from typing import Optional

from .config import Settings, get_config
from .resources import Application, Discover
from .services.errors import InvalidArgumentError
from .services.logging_context import LoggingContext, record
from .services.transport import HttpxRestfulClient, RestfulClient

logger = logging.getLogger(__name__)


def create_restful_client(config: Optional[Settings] = None) -> HttpxRestfulClient:
    """Build the default httpx-backed transport from settings."""
    config = config or get_config()
    return HttpxRestfulClient(timeout=config.request_timeout, user_agent=config.user_agent)


async def connect_application(
    restful_client: RestfulClient,
    logging_context: Optional[LoggingContext] = None,
    config: Optional[Settings] = None,
    endpoint_identity: Optional[str] = None,
) -> Application:
    """Discover -> Applications -> Application, each initialized in turn.

    The returned application has its embedded communication resolved.
    """
    config = config or get_config()
    if not endpoint_identity and not config.has_endpoint_id:
        raise InvalidArgumentError("No application endpoint identity configured")
    identity = endpoint_identity or config.application_endpoint_id

    discover = Discover(restful_client, config.discover_url)
    await discover.refresh_and_initialize(logging_context, identity)

    applications = discover.applications
    await applications.refresh_and_initialize(logging_context)

    application = applications.application
    await application.refresh_and_initialize(logging_context)

    record(logger, logging_context, f"Application {application.resource_url} ready for {identity}")
    return application

# Client SDK for the trusted application platform service
# Main module initialization

from .client import connect_application, create_restful_client
from .models import AdhocMeetingInput, AnonymousApplicationTokenInput
from .resources import Application, Applications, Communication, Discover
from .services import (
    ApplicationCapability,
    CapabilityNotAvailableError,
    CommunicationCapability,
    InvalidArgumentError,
    LoggingContext,
    PlatformServiceError,
    RemoteServiceError,
    TransportError,
)

__version__ = "0.1.0"


def main() -> None:
    """CLI entry point: walk the discovery chain and print capabilities."""
    import argparse
    import asyncio

    from rich.console import Console
    from rich.table import Table

    from .config import get_config
    from .services.logging_context import configure_logging

    config = get_config()
    parser = argparse.ArgumentParser(description="Inspect a trusted application")
    parser.add_argument("--discover-url", default=config.discover_url)
    parser.add_argument("--endpoint-id", default=config.application_endpoint_id)
    parser.add_argument("--log-level", default=config.log_level)
    args = parser.parse_args()

    configure_logging(args.log_level)
    config = config.model_copy(update={"discover_url": args.discover_url})

    async def run() -> Application:
        async with create_restful_client(config) as restful_client:
            return await connect_application(
                restful_client, LoggingContext(), config, endpoint_identity=args.endpoint_id
            )

    console = Console()
    try:
        application = asyncio.run(run())
    except PlatformServiceError as e:
        console.print(f"[red]{e.error_code}[/red]: {e.message}")
        raise SystemExit(1)

    table = Table(title=f"Application {application.resource_url}")
    table.add_column("Resource")
    table.add_column("Capability")
    table.add_column("Supported")
    for name, resource in (("application", application), ("communication", application.communication)):
        supported = resource.supported_capabilities()
        for capability in resource.capability_gate.capabilities():
            table.add_row(name, capability.value, "yes" if capability in supported else "no")
    console.print(table)

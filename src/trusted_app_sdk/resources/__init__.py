"""Hypermedia resources of the platform service."""

from .application import Application
from .applications import Applications
from .base import PlatformResource, ResourceState
from .communication import Communication
from .discover import Discover
from .results import AdhocMeetingResource, AnonymousApplicationTokenResource

__all__ = [
    "AdhocMeetingResource",
    "AnonymousApplicationTokenResource",
    "Application",
    "Applications",
    "Communication",
    "Discover",
    "PlatformResource",
    "ResourceState",
]

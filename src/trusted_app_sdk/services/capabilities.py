"""Capability gating for platform resources.

Every optional operation of a resource type is named by a capability. A
capability is supported when the relation backing it is present in the
resource's current link registry.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Optional, Set

from .link_registry import LinkRegistry


class ApplicationCapability(Enum):
    """Optional operations of an application resource."""
    GET_ANON_APPLICATION_TOKEN = "GetAnonApplicationToken"
    GET_ADHOC_MEETING_RESOURCE = "GetAdhocMeetingResource"


class CommunicationCapability(Enum):
    """Optional operations of a communication resource."""
    START_MESSAGING = "StartMessaging"
    START_AUDIO_VIDEO = "StartAudioVideo"
    JOIN_ONLINE_MEETING = "JoinOnlineMeeting"


APPLICATION_RELATIONS: Dict[ApplicationCapability, str] = {
    ApplicationCapability.GET_ANON_APPLICATION_TOKEN: "anonApplicationTokens",
    ApplicationCapability.GET_ADHOC_MEETING_RESOURCE: "adhocMeetings",
}

COMMUNICATION_RELATIONS: Dict[CommunicationCapability, str] = {
    CommunicationCapability.START_MESSAGING: "startMessaging",
    CommunicationCapability.START_AUDIO_VIDEO: "startAudioVideo",
    CommunicationCapability.JOIN_ONLINE_MEETING: "joinOnlineMeeting",
}


class CapabilityGate:
    """Answer capability questions against a link registry."""

    def __init__(self, relations: Optional[Mapping[Enum, str]] = None) -> None:
        self._relations: Dict[Enum, str] = dict(relations or {})

    def relation_for(self, capability: Enum) -> Optional[str]:
        return self._relations.get(capability)

    def capabilities(self) -> list[Enum]:
        return list(self._relations)

    def supports(self, links: Optional[LinkRegistry], capability: Enum) -> bool:
        """True iff the capability is known and its relation is present."""
        if links is None:
            return False
        relation = self._relations.get(capability)
        if relation is None:
            return False
        return links.has(relation)

    def supported(self, links: Optional[LinkRegistry]) -> Set[Enum]:
        return {cap for cap in self._relations if self.supports(links, cap)}

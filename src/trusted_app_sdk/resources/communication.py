"""Communication resource, delivered embedded in the application."""

from ..models.resources import CommunicationDocument
from ..services.capabilities import COMMUNICATION_RELATIONS, CapabilityGate
from .base import PlatformResource


class Communication(PlatformResource):
    """Entry point for messaging, audio/video and online meeting operations.

    Only capability queries are exposed; the operations themselves are
    reached through the relations listed in ``COMMUNICATION_RELATIONS``.
    """

    document_model = CommunicationDocument
    capability_gate = CapabilityGate(COMMUNICATION_RELATIONS)

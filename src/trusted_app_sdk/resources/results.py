"""Resources returned by capability-gated application operations."""

from datetime import datetime
from typing import Optional

from ..models.resources import AdhocMeetingDocument, AnonymousApplicationTokenDocument
from .base import PlatformResource


class AnonymousApplicationTokenResource(PlatformResource):
    """Token that lets an anonymous user act on behalf of the application."""

    document_model = AnonymousApplicationTokenDocument

    @property
    def auth_token(self) -> str:
        return self._document.auth_token

    @property
    def auth_token_expiry_time(self) -> datetime:
        return self._document.auth_token_expiry_time

    @property
    def anonymous_meeting_join_url(self) -> Optional[str]:
        return self._document.anonymous_meeting_join_url


class AdhocMeetingResource(PlatformResource):
    """An ad-hoc online meeting scheduled by the application."""

    document_model = AdhocMeetingDocument

    @property
    def online_meeting_uri(self) -> str:
        return self._document.online_meeting_uri

    @property
    def join_url(self) -> str:
        return self._document.join_url

    @property
    def subject(self) -> Optional[str]:
        return self._document.subject

"""Correlated logging for SDK call chains."""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class LoggingContext:
    """Correlation data threaded through one call chain."""
    tracking_id: uuid.UUID = field(default_factory=uuid.uuid4)
    job_id: Optional[str] = None

    def prefix(self) -> str:
        if self.job_id:
            return f"[{self.tracking_id}/{self.job_id}]"
        return f"[{self.tracking_id}]"


def record(logger: logging.Logger, logging_context: Optional[LoggingContext], message: str, *args: Any) -> None:
    """Emit an event, correlated when a context is supplied.

    Without a context the event is only written at DEBUG level.
    """
    if logging_context is None:
        logger.debug(message, *args)
    else:
        prefix = logging_context.prefix().replace("%", "%%")
        logger.info(f"{prefix} {message}", *args)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for console use."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)

"""Infrastructure implementations of the transport and notification sink protocols."""

from .transport import Cancelable, HttpxTransport, error_message_by_status
from .notifications import LoggingNotificationSink

__all__ = [
    "Cancelable",
    "HttpxTransport",
    "error_message_by_status",
    "LoggingNotificationSink",
]

"""Protocols for the collaborators consumed by lifecycle actions."""

from .transport import JSON_CONTENT_TYPE, CancelableRequest, TransportProtocol
from .notification_sink import AutoClose, NotificationSinkProtocol

__all__ = [
    "JSON_CONTENT_TYPE",
    "CancelableRequest",
    "TransportProtocol",
    "AutoClose",
    "NotificationSinkProtocol",
]

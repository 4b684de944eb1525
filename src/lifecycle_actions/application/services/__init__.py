"""Application services for lifecycle actions."""

from .action_request_controller import ActionRequestController
from .notification_dispatcher import (
    NotificationDispatcher,
    flatten_messages,
    parse_auto_hide,
)

__all__ = [
    "ActionRequestController",
    "NotificationDispatcher",
    "flatten_messages",
    "parse_auto_hide",
]

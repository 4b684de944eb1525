"""Application layer: the action controller, URL building and notification dispatch."""

from .url_builder import build_api_url
from .services import (
    ActionRequestController,
    NotificationDispatcher,
    flatten_messages,
    parse_auto_hide,
)

__all__ = [
    "build_api_url",
    "ActionRequestController",
    "NotificationDispatcher",
    "flatten_messages",
    "parse_auto_hide",
]

"""Notification dispatch.

Fans messages out to a notification sink, one notification per message.
"""

import logging
from typing import Any, List

from ...core.protocols import AutoClose, NotificationSinkProtocol
from ...core.value_objects import NotificationSeverity

logger = logging.getLogger(__name__)


def parse_auto_hide(auto_hide: Any) -> AutoClose:
    """Map an auto-hide flag to a sink auto-close policy.

    Only ``True`` uses the sink's default duration; anything else keeps the
    notification until it is dismissed.
    """
    return None if auto_hide is True else False


def flatten_messages(message: Any) -> List[Any]:
    """Turn a message or a list of messages into a flat list.

    One level of nesting is concatenated: ``["a", ["b", "c"]]`` becomes
    ``["a", "b", "c"]``.
    """
    if not isinstance(message, (list, tuple)):
        return [message]

    flattened: List[Any] = []
    for item in message:
        if isinstance(item, (list, tuple)):
            flattened.extend(item)
        else:
            flattened.append(item)
    return flattened


class NotificationDispatcher:
    """Severity-specific entry points over a notification sink."""

    def __init__(self, sink: NotificationSinkProtocol):
        self._sink = sink

    def show_success(self, message: Any, auto_hide: bool = True) -> None:
        self._show(NotificationSeverity.SUCCESS, message, auto_hide)

    def show_warning(self, message: Any, auto_hide: bool = True) -> None:
        self._show(NotificationSeverity.WARNING, message, auto_hide)

    def show_error(self, message: Any, auto_hide: bool = True) -> None:
        """Show error notifications.

        Exceptions are shown as their string form, without list handling.
        """
        if isinstance(message, BaseException):
            self._sink.notify(NotificationSeverity.ERROR, str(message), parse_auto_hide(auto_hide))
            return
        self._show(NotificationSeverity.ERROR, message, auto_hide)

    def show_info(self, message: Any, auto_hide: bool = True) -> None:
        self._show(NotificationSeverity.INFO, message, auto_hide)

    def _show(self, severity: NotificationSeverity, message: Any, auto_hide: Any) -> None:
        auto_close = parse_auto_hide(auto_hide)
        messages = flatten_messages(message)
        logger.debug(f"Dispatching {len(messages)} {severity} notification(s)")
        for item in messages:
            self._sink.notify(severity, item if isinstance(item, str) else str(item), auto_close)

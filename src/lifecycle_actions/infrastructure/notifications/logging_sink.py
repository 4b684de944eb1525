"""Notification sink that writes notifications to a logger."""

import logging
from typing import Optional

from ...config.settings import get_settings
from ...core.protocols import AutoClose, NotificationSinkProtocol
from ...core.value_objects import NotificationSeverity


class LoggingNotificationSink(NotificationSinkProtocol):
    """Writes each notification as one log record.

    Useful for headless consumers (scripts, workers) that still drive
    lifecycle actions and want their outcome reported.
    """

    def __init__(
        self,
        logger_name: str = "lifecycle_actions.notifications",
        default_auto_close_ms: Optional[int] = None,
    ):
        self._logger = logging.getLogger(logger_name)
        self._default_auto_close_ms = default_auto_close_ms or get_settings().notification_auto_close_ms

    def resolve_auto_close(self, auto_close: AutoClose) -> Optional[int]:
        """Milliseconds until dismissal, or None to keep the notification."""
        return None if auto_close is False else self._default_auto_close_ms

    def notify(self, severity: NotificationSeverity, message: str, auto_close: AutoClose = None) -> None:
        self._logger.log(
            severity.log_level,
            f"[{severity}] {message}",
            extra={
                "notification_severity": severity.value,
                "auto_close_ms": self.resolve_auto_close(auto_close),
            },
        )

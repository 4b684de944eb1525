"""Notification severity value object."""

import logging
from enum import Enum


class NotificationSeverity(Enum):
    """Severity of a user-facing notification."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @property
    def log_level(self) -> int:
        """Logging level used when a notification is written to a log."""
        if self is NotificationSeverity.ERROR:
            return logging.ERROR
        if self is NotificationSeverity.WARNING:
            return logging.WARNING
        return logging.INFO

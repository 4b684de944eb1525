"""Notification sink protocol."""

from abc import ABC, abstractmethod
from typing import Literal, Optional

from ..value_objects import NotificationSeverity


# None: use the sink's default auto-dismiss duration. False: never auto-dismiss.
AutoClose = Optional[Literal[False]]


class NotificationSinkProtocol(ABC):
    """Displays single notifications to the user."""

    @abstractmethod
    def notify(self, severity: NotificationSeverity, message: str, auto_close: AutoClose = None) -> None:
        """
        Display one notification.

        Args:
            severity: Notification severity
            message: Text to display
            auto_close: Auto-dismiss policy
        """

"""Action error taxonomy.

These are the only errors an ``ActionRequestController`` result future fails
with. They are built by the controller's outcome interpretation and are meant
to be shown to the user as they are.
"""

from typing import Any, Dict, List, Optional

from .base import LifecycleActionsError


NETWORK_INTERRUPTED_MESSAGE = (
    "Request interrupted or invalid response received from the server. Please try again."
)


class ActionError(LifecycleActionsError):
    """Base class for lifecycle action failures."""


class NetworkInterruptedError(ActionError):
    """No usable response: connection lost, invalid payload or cancelled."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=NETWORK_INTERRUPTED_MESSAGE,
            error_code="NETWORK_INTERRUPTED",
            details=details,
        )


class BadRequestError(ActionError):
    """The server rejected the action, with user-facing messages and field errors."""

    def __init__(self, messages: List[str], errors: Dict[str, str]):
        self.messages = list(messages)
        self.errors = dict(errors)
        super().__init__(
            message="; ".join(self.messages) or "Bad request",
            error_code="BAD_REQUEST",
            details={"messages": self.messages, "errors": self.errors},
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BadRequestError):
            return NotImplemented
        return self.messages == other.messages and self.errors == other.errors

    __hash__ = ActionError.__hash__


class HttpStatusError(ActionError):
    """Any other non-2xx response."""

    def __init__(self, code: int, message: str):
        self.code = code
        super().__init__(
            message=message,
            error_code="HTTP_STATUS",
            details={"code": code},
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpStatusError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    __hash__ = ActionError.__hash__

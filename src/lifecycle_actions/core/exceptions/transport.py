"""Transport-level rejection raised by transport implementations."""

from typing import Any, Optional

from .base import LifecycleActionsError


class TransportError(LifecycleActionsError):
    """Rejection of a transport call.

    ``status`` is the HTTP status code of the response, or ``0`` when no usable
    response was received (connection failure, undecodable body, cancellation).
    ``response_json`` holds the decoded error body when there was one.
    """

    def __init__(
        self,
        status: int,
        message: Optional[str] = None,
        response_json: Optional[Any] = None,
    ):
        super().__init__(
            message=message or f"Transport request failed with status {status}",
            error_code="TRANSPORT_ERROR",
            details={"status": status},
        )
        self.status = status
        self.response_json = response_json

    @property
    def is_interrupted(self) -> bool:
        """True when no response was received."""
        return self.status == 0

"""Controller state snapshot."""

from dataclasses import dataclass
from typing import Optional

from .pending_request import PendingRequest


@dataclass(frozen=True)
class ControllerState:
    """Observable state of an action controller at one point in time."""

    pending: Optional[PendingRequest] = None

    @property
    def is_loading(self) -> bool:
        return self.pending is not None

"""Entities for lifecycle actions."""

from .action_response import ActionResponse
from .pending_request import PendingRequest
from .controller_state import ControllerState

__all__ = [
    "ActionResponse",
    "PendingRequest",
    "ControllerState",
]

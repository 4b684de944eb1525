"""Exception hierarchy for lifecycle-actions."""

from .base import (
    LifecycleActionsError,
    InvalidResourceDescriptorError,
    ActionSerializationError,
    TransportConfigurationError,
    get_http_status_code,
    create_error_response,
)
from .transport import TransportError
from .action import (
    NETWORK_INTERRUPTED_MESSAGE,
    ActionError,
    NetworkInterruptedError,
    BadRequestError,
    HttpStatusError,
)

__all__ = [
    # Base Exception
    "LifecycleActionsError",
    "InvalidResourceDescriptorError",
    "ActionSerializationError",
    "TransportConfigurationError",

    # Transport
    "TransportError",

    # Action Errors
    "NETWORK_INTERRUPTED_MESSAGE",
    "ActionError",
    "NetworkInterruptedError",
    "BadRequestError",
    "HttpStatusError",

    # Utility Functions
    "get_http_status_code",
    "create_error_response",
]

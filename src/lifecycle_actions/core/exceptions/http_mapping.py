"""HTTP status code mapping for exceptions."""

from .action import ActionError, BadRequestError, HttpStatusError, NetworkInterruptedError
from .base import (
    ActionSerializationError,
    InvalidResourceDescriptorError,
    LifecycleActionsError,
    TransportConfigurationError,
)
from .transport import TransportError


# Closest HTTP status each exception stands for; 0 means "no response"
HTTP_STATUS_MAP = {
    # 0 No response
    NetworkInterruptedError: 0,

    # 400 Bad Request
    BadRequestError: 400,
    ActionSerializationError: 400,
    InvalidResourceDescriptorError: 400,

    # 500 Internal Server Error
    TransportConfigurationError: 500,

    ActionError: 500,
    LifecycleActionsError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Errors carrying their own status (``HttpStatusError``, ``TransportError``)
    report it; otherwise the most specific class in the map wins.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    if isinstance(exception, HttpStatusError):
        return exception.code
    if isinstance(exception, TransportError):
        return exception.status

    for exception_class in type(exception).__mro__:
        if exception_class in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_class]

    return 500

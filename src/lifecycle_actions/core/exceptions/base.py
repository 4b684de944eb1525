"""Base exceptions for lifecycle-actions.

All exceptions inherit from LifecycleActionsError and carry an error code
and a details mapping for logging and API-style error responses.
"""

from typing import Any, Dict, Optional


class LifecycleActionsError(Exception):
    """Base exception for all lifecycle-actions errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidResourceDescriptorError(LifecycleActionsError):
    """Raised when a controller is built for an empty resource name."""


class ActionSerializationError(LifecycleActionsError):
    """Raised when an action body cannot be encoded as JSON."""


class TransportConfigurationError(LifecycleActionsError):
    """Raised when a transport cannot be built from the given settings."""


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: LifecycleActionsError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The lifecycle-actions exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }

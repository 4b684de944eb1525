"""Transport implementations."""

from .cancelable import Cancelable
from .httpx_transport import HttpxTransport
from .status_messages import error_message_by_status

__all__ = [
    "Cancelable",
    "HttpxTransport",
    "error_message_by_status",
]

"""Transport protocol for issuing lifecycle action requests."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Optional


JSON_CONTENT_TYPE = "application/json"


class CancelableRequest(ABC):
    """An issued transport call that can be cancelled."""

    @property
    @abstractmethod
    def future(self) -> "asyncio.Future[Any]":
        """Settles with the decoded response payload or fails with ``TransportError``."""

    @abstractmethod
    def cancel(self, status: int = 0) -> bool:
        """
        Force the request's future to fail with ``TransportError(status)``.

        Args:
            status: Synthetic status carried by the rejection

        Returns:
            True if the request was still in flight, False if it had already settled
        """


class TransportProtocol(ABC):
    """Protocol for the network capability the controller consumes."""

    @abstractmethod
    def get(self, url: str) -> CancelableRequest:
        """Issue a GET request."""

    @abstractmethod
    def post(self, url: str, body: Optional[str], content_type: str = JSON_CONTENT_TYPE) -> CancelableRequest:
        """Issue a POST request."""

    @abstractmethod
    def put(self, url: str, body: Optional[str], content_type: str = JSON_CONTENT_TYPE) -> CancelableRequest:
        """Issue a PUT request."""

    @abstractmethod
    def delete(self, url: str, body: Optional[str], content_type: str = JSON_CONTENT_TYPE) -> CancelableRequest:
        """Issue a DELETE request."""

    @abstractmethod
    def error_message_by_status(self, status: int) -> str:
        """User-facing message for a failed response status."""

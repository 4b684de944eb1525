"""HTTP transport implementation using httpx.

Each call runs as its own task so it can be cancelled independently.
"""

import logging
from typing import Any, Optional

import httpx

from ...config.settings import LifecycleActionsSettings, get_settings
from ...core.exceptions import TransportConfigurationError, TransportError
from ...core.protocols import JSON_CONTENT_TYPE, TransportProtocol
from ...core.value_objects import HttpVerb
from .cancelable import Cancelable
from .status_messages import error_message_by_status

logger = logging.getLogger(__name__)


class HttpxTransport(TransportProtocol):
    """Transport for the content management JSON API.

    Responses are decoded as JSON. Failures become ``TransportError``:

    - no response or an undecodable body: status 0
    - non-2xx: the response status, with the decoded body if any
    """

    def __init__(
        self,
        settings: Optional[LifecycleActionsSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the transport.

        Args:
            settings: Connection settings, defaults to the environment
            client: Preconfigured client; the transport does not close it

        Raises:
            TransportConfigurationError: If no client is given and no
                server URL is configured
        """
        self._settings = settings or get_settings()
        if client is None and not self._settings.server_url:
            raise TransportConfigurationError(
                "No server URL configured; set LIFECYCLE_ACTIONS_SERVER_URL or pass a client",
                details={"setting": "server_url"},
            )
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._settings.server_url,
                timeout=self._settings.request_timeout_seconds,
                verify=self._settings.verify_ssl,
                headers={
                    "User-Agent": self._settings.user_agent,
                    "Accept": JSON_CONTENT_TYPE,
                },
            )
            self._owns_client = True
        return self._client

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def get(self, url: str) -> Cancelable:
        return Cancelable(self._request(HttpVerb.GET, url))

    def post(self, url: str, body: Optional[str], content_type: str = JSON_CONTENT_TYPE) -> Cancelable:
        return Cancelable(self._request(HttpVerb.POST, url, body, content_type))

    def put(self, url: str, body: Optional[str], content_type: str = JSON_CONTENT_TYPE) -> Cancelable:
        return Cancelable(self._request(HttpVerb.PUT, url, body, content_type))

    def delete(self, url: str, body: Optional[str], content_type: str = JSON_CONTENT_TYPE) -> Cancelable:
        return Cancelable(self._request(HttpVerb.DELETE, url, body, content_type))

    def error_message_by_status(self, status: int) -> str:
        return error_message_by_status(status)

    async def _request(
        self,
        verb: HttpVerb,
        url: str,
        body: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Any:
        headers = {"Content-Type": content_type} if body is not None and content_type else None
        client = self._get_client()

        try:
            response = await client.request(verb.value, url, content=body, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"{verb} {url} failed without response: {e!r}")
            raise TransportError(status=0, message=str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.debug(f"{verb} {url} returned {response.status_code}")
            raise TransportError(
                status=response.status_code,
                message=f"{verb} {url} returned {response.status_code}",
                response_json=self._decode_or_none(response),
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"{verb} {url} returned a body that is not JSON")
            raise TransportError(status=0, message=f"Invalid JSON response from {url}") from e

    @staticmethod
    def _decode_or_none(response: httpx.Response) -> Optional[Any]:
        try:
            return response.json()
        except ValueError:
            return None

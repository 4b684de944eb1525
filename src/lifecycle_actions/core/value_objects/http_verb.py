"""HTTP verb value object."""

from enum import Enum


class HttpVerb(Enum):
    """HTTP verbs the transport capability exposes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @property
    def sends_body(self) -> bool:
        """Check if requests with this verb carry a JSON body."""
        return self is not HttpVerb.GET

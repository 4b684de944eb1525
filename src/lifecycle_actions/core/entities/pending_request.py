"""Pending request entity."""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import uuid4

from ...utils.datetime import milliseconds_since, utc_now
from ..protocols import CancelableRequest
from ..value_objects import ActionKind


@dataclass
class PendingRequest:
    """The single in-flight action of a controller.

    ``handle`` cancels the transport call; ``result`` is the future handed to
    the caller. The request is settled once ``result`` is done.
    """

    handle: CancelableRequest
    result: "asyncio.Future[Any]"
    kind: ActionKind
    url: str
    request_id: str = field(default_factory=lambda: uuid4().hex[:12])
    issued_at: datetime = field(default_factory=utc_now)

    @property
    def is_settled(self) -> bool:
        """Check if the caller-facing future already has an outcome."""
        return self.result.done()

    def resolve(self, value: Any) -> bool:
        """Settle with a value. Returns False if already settled."""
        if self.result.done():
            return False
        self.result.set_result(value)
        return True

    def reject(self, error: BaseException) -> bool:
        """Settle with an error. Returns False if already settled."""
        if self.result.done():
            return False
        self.result.set_exception(error)
        return True

    def elapsed_ms(self) -> int:
        """Milliseconds since the request was issued."""
        return milliseconds_since(self.issued_at)

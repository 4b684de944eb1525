"""Pytest configuration and fixtures for lifecycle-actions tests."""

import asyncio
from dataclasses import dataclass
from typing import Any, List, Optional

import pytest

from lifecycle_actions.application import ActionRequestController, NotificationDispatcher
from lifecycle_actions.config.settings import DEFAULT_API_BASE_PATH
from lifecycle_actions.core.exceptions import TransportError
from lifecycle_actions.core.protocols import (
    NotificationSinkProtocol,
    TransportProtocol,
)
from lifecycle_actions.core.value_objects import HttpVerb, ResourceDescriptor
from lifecycle_actions.infrastructure import Cancelable


@dataclass
class RecordedCall:
    """A transport call that stays in flight until the test settles it."""

    verb: HttpVerb
    url: str
    body: Optional[str]
    content_type: Optional[str]
    outcome: "asyncio.Future[Any]"
    request: Optional[Cancelable] = None

    def respond(self, payload: Any) -> None:
        self.outcome.set_result(payload)

    def fail(self, status: int, response_json: Any = None) -> None:
        self.outcome.set_exception(TransportError(status=status, response_json=response_json))

    def raise_error(self, error: BaseException) -> None:
        self.outcome.set_exception(error)


class ScriptedTransport(TransportProtocol):
    """Transport double recording every call."""

    def __init__(self):
        self.calls: List[RecordedCall] = []

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]

    def _record(self, verb, url, body=None, content_type=None) -> Cancelable:
        outcome = asyncio.get_running_loop().create_future()

        async def wait_for_outcome():
            return await outcome

        call = RecordedCall(verb, url, body, content_type, outcome)
        call.request = Cancelable(wait_for_outcome())
        self.calls.append(call)
        return call.request

    def get(self, url):
        return self._record(HttpVerb.GET, url)

    def post(self, url, body, content_type="application/json"):
        return self._record(HttpVerb.POST, url, body, content_type)

    def put(self, url, body, content_type="application/json"):
        return self._record(HttpVerb.PUT, url, body, content_type)

    def delete(self, url, body, content_type="application/json"):
        return self._record(HttpVerb.DELETE, url, body, content_type)

    def error_message_by_status(self, status):
        return f"Failed with status {status}"


async def drain_loop(iterations: int = 20) -> None:
    """Let pending callbacks and tasks run."""
    for _ in range(iterations):
        await asyncio.sleep(0)


@pytest.fixture
def transport():
    """Scripted transport double."""
    return ScriptedTransport()


@pytest.fixture
def controller(transport):
    """Controller for the projects collection."""
    return ActionRequestController(
        ResourceDescriptor("projects"),
        transport,
        base_path=DEFAULT_API_BASE_PATH,
    )


@pytest.fixture
def filters_controller(transport):
    """Controller for the filters of a project."""
    return ActionRequestController(
        ResourceDescriptor("projects", "filters"),
        transport,
        base_path=DEFAULT_API_BASE_PATH,
    )


@pytest.fixture
def sink(mocker):
    """Notification sink mock recording every notify call."""
    return mocker.Mock(spec=NotificationSinkProtocol)


@pytest.fixture
def dispatcher(sink):
    """Dispatcher writing to the mocked sink."""
    return NotificationDispatcher(sink)

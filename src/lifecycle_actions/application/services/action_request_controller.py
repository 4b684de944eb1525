"""Lifecycle action request controller.

Issues one action request at a time against a content management resource,
tracks whether it is in flight, and turns its outcome into either the
response data or an ``ActionError``.

The controller is meant to be driven from a single event loop. All state
changes happen in loop callbacks, so no locking is needed.
"""

import asyncio
import functools
import json
import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationError

from ...config.settings import get_settings
from ...core.entities import ActionResponse, ControllerState, PendingRequest
from ...core.exceptions import (
    ActionError,
    ActionSerializationError,
    BadRequestError,
    HttpStatusError,
    NetworkInterruptedError,
    TransportError,
)
from ...core.protocols import JSON_CONTENT_TYPE, CancelableRequest, TransportProtocol
from ...core.value_objects import ActionKind, HttpVerb, ResourceDescriptor
from ..url_builder import build_api_url

logger = logging.getLogger(__name__)


class ActionRequestController:
    """Single-flight action requests for one resource collection.

    At most one request is pending per controller. While one is pending,
    further ``invoke_action`` calls are ignored: they issue nothing and return
    a future that never settles, so double submissions need no special
    handling by the caller.

    Every pending request settles exactly once, either with the ``data`` of a
    successful response or with one of:

    - ``NetworkInterruptedError``: no usable response, including cancellation
    - ``BadRequestError``: HTTP 400 or a ``success: false`` envelope
    - ``HttpStatusError``: any other failed status

    The pending slot is cleared before the result future settles, so
    ``is_loading`` is already False when the caller sees the outcome.
    """

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        transport: TransportProtocol,
        base_path: Optional[str] = None,
    ):
        """Initialize the controller.

        Args:
            descriptor: Resource collection targeted by the actions
            transport: Network capability used to issue requests
            base_path: API namespace prefix, defaults to the configured one
        """
        self._descriptor = descriptor
        self._transport = transport
        self._base_path = base_path if base_path is not None else get_settings().api_base_path
        self._pending: Optional[PendingRequest] = None

    @property
    def descriptor(self) -> ResourceDescriptor:
        return self._descriptor

    @property
    def is_loading(self) -> bool:
        """True while a request is in flight."""
        return self._pending is not None

    @property
    def state(self) -> ControllerState:
        """Snapshot of the current controller state."""
        return ControllerState(pending=self._pending)

    def invoke_action(
        self,
        body: Any,
        kind: Union[ActionKind, str, None] = ActionKind.GET,
        resource_id: Optional[Union[str, int]] = None,
    ) -> "asyncio.Future[Any]":
        """Issue an action request.

        Must be called from a running event loop.

        Args:
            body: JSON-serializable request body (or a pydantic model)
            kind: Action kind; unknown kinds are treated as GET
            resource_id: Id of the targeted resource, if any

        Returns:
            Future resolving with the response ``data`` or failing with an
            ``ActionError``. Never settles if a request was already pending.

        Raises:
            ActionSerializationError: If the body cannot be encoded as JSON
        """
        loop = asyncio.get_running_loop()

        if self._pending is not None:
            logger.debug(
                f"Ignoring {kind} on {self._descriptor}: request "
                f"{self._pending.request_id} is still in flight"
            )
            return loop.create_future()

        action_kind = ActionKind.parse(kind)
        url = build_api_url(
            self._descriptor.resource,
            self._descriptor.nested_resource,
            resource_id,
            base_path=self._base_path,
        )
        payload = self._serialize(body) if action_kind.verb.sends_body else None

        handle = self._issue(action_kind.verb, url, payload)
        pending = PendingRequest(
            handle=handle,
            result=loop.create_future(),
            kind=action_kind,
            url=url,
        )
        self._pending = pending

        logger.info(f"Issued {action_kind} request {pending.request_id}: {action_kind.verb} {url}")

        handle.future.add_done_callback(functools.partial(self._on_transport_settled, pending))
        pending.result.add_done_callback(functools.partial(self._on_result_done, pending))
        return pending.result

    def cancel_action(self) -> None:
        """Cancel the pending request, if any.

        The request's future fails with ``NetworkInterruptedError``. The slot
        is freed immediately, so a new action can be issued right away.
        """
        pending = self._pending
        if pending is None:
            logger.debug(f"No pending request to cancel on {self._descriptor}")
            return

        self._pending = None
        if pending.handle.cancel(status=0):
            logger.info(f"Cancelled request {pending.request_id} after {pending.elapsed_ms()}ms")
        else:
            logger.debug(f"Request {pending.request_id} settled before it could be cancelled")

    def _issue(self, verb: HttpVerb, url: str, payload: Optional[str]) -> CancelableRequest:
        if verb is HttpVerb.GET:
            return self._transport.get(url)

        send = {
            HttpVerb.POST: self._transport.post,
            HttpVerb.PUT: self._transport.put,
            HttpVerb.DELETE: self._transport.delete,
        }[verb]
        return send(url, payload, JSON_CONTENT_TYPE)

    @staticmethod
    def _serialize(body: Any) -> Optional[str]:
        if body is None:
            return None
        if isinstance(body, BaseModel):
            return body.model_dump_json()
        try:
            return json.dumps(body)
        except (TypeError, ValueError) as e:
            raise ActionSerializationError(
                f"Action body is not JSON serializable: {e}",
                details={"body_type": type(body).__name__},
            ) from e

    def _on_transport_settled(self, pending: PendingRequest, future: "asyncio.Future[Any]") -> None:
        # A cancelled request has already left the slot, possibly to a newer one
        if self._pending is pending:
            self._pending = None

        if pending.is_settled:
            if not future.cancelled():
                future.exception()  # mark the discarded outcome as retrieved
            logger.debug(f"Request {pending.request_id} already settled, ignoring transport outcome")
            return

        if future.cancelled():
            self._fail(pending, NetworkInterruptedError(details={"reason": "cancelled"}))
            return

        error = future.exception()
        if error is not None:
            self._fail(pending, self._classify_failure(error))
            return

        try:
            response = ActionResponse.from_payload(future.result())
        except ValidationError as e:
            logger.warning(f"Request {pending.request_id} returned an invalid payload: {e}")
            self._fail(pending, NetworkInterruptedError(details={"reason": "invalid_response"}))
            return

        if not response.success:
            self._fail(pending, BadRequestError(response.user_messages, response.errors))
            return

        logger.info(f"Request {pending.request_id} succeeded in {pending.elapsed_ms()}ms")
        pending.resolve(response.data)

    def _on_result_done(self, pending: PendingRequest, result: "asyncio.Future[Any]") -> None:
        # The caller gave up on the result (e.g. asyncio.wait_for timed out)
        if result.cancelled() and self._pending is pending:
            logger.info(f"Result of request {pending.request_id} was cancelled by the caller")
            self.cancel_action()

    def _classify_failure(self, error: BaseException) -> ActionError:
        if isinstance(error, TransportError):
            if error.status == 0:
                return NetworkInterruptedError(details={"transport_message": error.message})
            if error.status == 400:
                body = ActionResponse.from_error_body(error.response_json)
                return BadRequestError(body.user_messages, body.errors)
            return HttpStatusError(error.status, self._transport.error_message_by_status(error.status))

        logger.error(f"Unexpected transport failure: {error!r}", exc_info=error)
        return NetworkInterruptedError(
            details={
                "original_error": str(error),
                "original_error_type": type(error).__name__,
            }
        )

    def _fail(self, pending: PendingRequest, error: ActionError) -> None:
        logger.warning(
            f"Request {pending.request_id} ({pending.kind} {pending.url}) failed: "
            f"{error.error_code}: {error.message}"
        )
        pending.reject(error)

"""Factory functions for lifecycle action components."""

from typing import Optional

from .application import ActionRequestController, NotificationDispatcher
from .config.settings import LifecycleActionsSettings, get_settings
from .core.protocols import NotificationSinkProtocol, TransportProtocol
from .core.value_objects import ResourceDescriptor
from .infrastructure import HttpxTransport, LoggingNotificationSink


def create_action_request_controller(
    resource: str,
    nested_resource: Optional[str] = None,
    transport: Optional[TransportProtocol] = None,
    settings: Optional[LifecycleActionsSettings] = None,
) -> ActionRequestController:
    """Create a controller for a content management resource.

    Args:
        resource: Resource collection, e.g. ``projects``
        nested_resource: Sub-collection of a single resource, e.g. ``filters``
        transport: Transport to use, defaults to an ``HttpxTransport``
        settings: Settings, defaults to the environment

    Returns:
        Configured ActionRequestController
    """
    settings = settings or get_settings()
    return ActionRequestController(
        descriptor=ResourceDescriptor(resource, nested_resource),
        transport=transport or HttpxTransport(settings=settings),
        base_path=settings.api_base_path,
    )


def create_notification_dispatcher(
    sink: Optional[NotificationSinkProtocol] = None,
    settings: Optional[LifecycleActionsSettings] = None,
) -> NotificationDispatcher:
    """Create a dispatcher, logging notifications unless a sink is given."""
    if sink is None:
        settings = settings or get_settings()
        sink = LoggingNotificationSink(default_auto_close_ms=settings.notification_auto_close_ms)
    return NotificationDispatcher(sink)

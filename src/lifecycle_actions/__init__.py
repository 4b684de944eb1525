"""lifecycle-actions - single-flight lifecycle action requests.

Issues create/update/delete/custom actions against content management
resources, one request at a time per controller, with cancellation and a
small error taxonomy meant to be shown to users.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    LifecycleActionsSettings,
    get_settings,
)

from .core.exceptions import (
    # Base Exception
    LifecycleActionsError,
    InvalidResourceDescriptorError,
    ActionSerializationError,
    TransportConfigurationError,

    # Action Errors
    ActionError,
    NetworkInterruptedError,
    BadRequestError,
    HttpStatusError,
    TransportError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .core.value_objects import (
    ActionKind,
    HttpVerb,
    NotificationSeverity,
    ResourceDescriptor,
)

from .core.entities import (
    ActionResponse,
    ControllerState,
    PendingRequest,
)

from .core.protocols import (
    CancelableRequest,
    NotificationSinkProtocol,
    TransportProtocol,
)

from .application import (
    ActionRequestController,
    NotificationDispatcher,
    build_api_url,
)

from .infrastructure import (
    Cancelable,
    HttpxTransport,
    LoggingNotificationSink,
)

from .factory import (
    create_action_request_controller,
    create_notification_dispatcher,
)

__all__ = [
    "__version__",

    # Configuration
    "LifecycleActionsSettings",
    "get_settings",

    # Exceptions
    "LifecycleActionsError",
    "InvalidResourceDescriptorError",
    "ActionSerializationError",
    "TransportConfigurationError",
    "ActionError",
    "NetworkInterruptedError",
    "BadRequestError",
    "HttpStatusError",
    "TransportError",
    "get_http_status_code",
    "create_error_response",

    # Value Objects
    "ActionKind",
    "HttpVerb",
    "NotificationSeverity",
    "ResourceDescriptor",

    # Entities
    "ActionResponse",
    "ControllerState",
    "PendingRequest",

    # Protocols
    "CancelableRequest",
    "NotificationSinkProtocol",
    "TransportProtocol",

    # Application
    "ActionRequestController",
    "NotificationDispatcher",
    "build_api_url",

    # Infrastructure
    "Cancelable",
    "HttpxTransport",
    "LoggingNotificationSink",

    # Factories
    "create_action_request_controller",
    "create_notification_dispatcher",
]

"""Value objects for lifecycle actions."""

from .http_verb import HttpVerb
from .action_kind import ActionKind
from .resource_descriptor import ResourceDescriptor
from .notification_severity import NotificationSeverity

__all__ = [
    "HttpVerb",
    "ActionKind",
    "ResourceDescriptor",
    "NotificationSeverity",
]

"""Action kind value object.

Pure value object - maps each lifecycle action to exactly one HTTP verb.
"""

import logging
from enum import Enum
from typing import Union

from .http_verb import HttpVerb

logger = logging.getLogger(__name__)


class ActionKind(Enum):
    """Lifecycle action kind enumeration.

    - GET: read the resource
    - CREATE: create a new resource
    - ACTION: run a custom action (build, promote, ...) on a resource
    - UPDATE: update an existing resource
    - DELETE: delete a resource
    """

    GET = "get"
    CREATE = "create"
    ACTION = "action"
    UPDATE = "update"
    DELETE = "delete"

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @property
    def verb(self) -> HttpVerb:
        """HTTP verb used to issue this action."""
        return _VERBS[self]

    @property
    def is_mutation(self) -> bool:
        """Check if this action changes server state."""
        return self is not ActionKind.GET

    @classmethod
    def parse(cls, value: Union["ActionKind", str, None]) -> "ActionKind":
        """Resolve a kind from an enum member or its name/value.

        Unknown or missing kinds fall back to ``GET``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for kind in cls:
                if kind.value == normalized:
                    return kind
        logger.debug(f"Unknown action kind {value!r}, falling back to {cls.GET}")
        return cls.GET


_VERBS = {
    ActionKind.GET: HttpVerb.GET,
    ActionKind.CREATE: HttpVerb.POST,
    ActionKind.ACTION: HttpVerb.POST,
    ActionKind.UPDATE: HttpVerb.PUT,
    ActionKind.DELETE: HttpVerb.DELETE,
}

"""Resource descriptor value object."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidResourceDescriptorError


@dataclass(frozen=True)
class ResourceDescriptor:
    """Identifies the collection a controller's actions target.

    ``nested_resource`` names a sub-collection of a single resource, e.g.
    ``filters`` in ``projects/<id>/filters``.
    """

    resource: str
    nested_resource: Optional[str] = None

    def __post_init__(self):
        """Validate resource descriptor."""
        resource = (self.resource or "").strip("/ ")
        if not resource:
            raise InvalidResourceDescriptorError(
                "Resource name cannot be empty",
                details={"nested_resource": self.nested_resource},
            )
        object.__setattr__(self, "resource", resource)
        if self.nested_resource is not None:
            nested = self.nested_resource.strip("/ ")
            object.__setattr__(self, "nested_resource", nested or None)

    def __str__(self) -> str:
        if self.nested_resource:
            return f"{self.resource}/*/{self.nested_resource}"
        return self.resource

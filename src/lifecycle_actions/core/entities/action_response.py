"""Action response entity.

Decoded envelope returned by the content management API:
``{success, data, messages, errors}``.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ActionResponse(BaseModel):
    """Response envelope of a lifecycle action."""

    model_config = ConfigDict(extra="allow", frozen=True)

    success: bool = False
    data: Any = None
    messages: List[Any] = Field(default_factory=list)
    errors: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("messages", mode="before")
    @classmethod
    def null_messages_to_empty(cls, value: Any) -> Any:
        """Treat a JSON null as no messages."""
        return [] if value is None else value

    @field_validator("errors", mode="before")
    @classmethod
    def null_errors_to_empty(cls, value: Any) -> Any:
        """Treat a JSON null as no field errors."""
        return {} if value is None else value

    @property
    def user_messages(self) -> List[Any]:
        """Messages with empty entries removed."""
        return [message for message in self.messages if message]

    @classmethod
    def from_payload(cls, payload: Any) -> "ActionResponse":
        """Validate a decoded payload.

        Raises:
            pydantic.ValidationError: If the payload is not an envelope
        """
        if payload is None:
            payload = {}
        return cls.model_validate(payload)

    @classmethod
    def from_error_body(cls, payload: Optional[Any]) -> "ActionResponse":
        """Best-effort parse of an error response body; never raises."""
        try:
            return cls.from_payload(payload)
        except ValidationError:
            return cls()

"""Error taxonomy shared by the validation engine, services and repositories.

Every failure a caller can act on is raised as a ``ServiceError`` subclass whose
``kind`` says what went wrong. The HTTP layer turns ``kind`` into a status code
in one place (see ``football_api.app``); nothing downstream inspects messages.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    NO_FIELDS_PROVIDED = "no_fields_provided"
    INTERNAL = "internal"


class ServiceError(Exception):
    """Base class for classified errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message, "type": self.kind.value}
        if self.field:
            payload["field"] = self.field
        return payload


class ValidationError(ServiceError):
    """A field value is missing, malformed or out of range."""

    kind = ErrorKind.INVALID_ARGUMENT


class NotFoundError(ServiceError):
    """The target or a referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: Any, field: Optional[str] = None):
        super().__init__(f"{entity} with ID {entity_id} not found", field=field)
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(ServiceError):
    """A uniqueness or referential rule would be broken by the write."""

    kind = ErrorKind.CONFLICT


class NoFieldsProvidedError(ServiceError):
    """An update request that changes nothing."""

    kind = ErrorKind.NO_FIELDS_PROVIDED

    def __init__(self, message: str = "at least one field must be provided for update"):
        super().__init__(message)


class InternalError(ServiceError):
    """Storage failure unrelated to validation."""

    kind = ErrorKind.INTERNAL

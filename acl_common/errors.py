"""
Shared error handling for the ACL service.
"""

from enum import Enum
from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class AclEntityKind(str, Enum):
    """Kinds of configuration entries that can be looked up."""
    ROLE = "role"
    GROUP = "group"


class AclException(Exception):
    """Base exception for ACL errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.code, self.message, self.details))

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class NotFoundError(AclException):
    """A role or group name did not resolve against the configuration."""

    def __init__(self, kind: AclEntityKind, name: str):
        self.kind = AclEntityKind(kind)
        self.name = name
        super().__init__(
            "NOT_FOUND",
            f"{self.kind.value.capitalize()} {name} not found",
            {"kind": self.kind.value, "name": name}
        )

    def __reduce__(self):
        return (type(self), (self.kind, self.name))

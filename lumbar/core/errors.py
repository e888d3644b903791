"""
Error taxonomy.

Every failure surfaced by the services belongs to one of four kinds:

- ``NotFoundError``       a referenced routine, exercise or session does not exist
- ``InvalidArgumentError`` caller input violates a precondition
- ``ForbiddenError``      structurally valid request disallowed by policy
- ``StorageFailureError`` the persistence layer could not complete an operation

Errors carry a human-readable ``message`` and an optional machine-readable
``reason`` so callers can tell apart failures of the same kind.
"""

from typing import Any, Optional


class LumbarError(Exception):
    """Base class for all domain errors.

    Attributes:
        kind: Error kind label (``not_found``, ``invalid_argument`` ...)
        message: Human-readable description
        reason: Optional machine-readable reason code
        details: Optional extra context (e.g. the offending id)
    """

    kind: str = "error"

    def __init__(self, message: str, reason: Optional[str] = None, **details: Any):
        self.message = message
        self.reason = reason
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.kind, "reason": self.reason, "detail": self.message}
        if self.details:
            payload["context"] = self.details
        return payload


class NotFoundError(LumbarError):
    kind = "not_found"


class InvalidArgumentError(LumbarError):
    kind = "invalid_argument"


class ForbiddenError(LumbarError):
    kind = "forbidden"


class StorageFailureError(LumbarError):
    """Raised when the store fails.  Never retried."""

    kind = "storage_failure"

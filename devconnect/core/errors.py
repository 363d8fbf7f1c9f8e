"""
Typed error hierarchy for the DevConnect backend.

Every error raised by the domain or use case layer derives from DomainError and
carries a stable ``code`` and the HTTP status the API layer renders it with.
Client-facing errors (400-level) expose their message; infrastructure errors
(500-level) expose only a generic message.
"""

# Standard library imports
from typing import Any, Dict, List, Optional, Sequence, Tuple


class DomainError(Exception):
    """Base exception for all DevConnect errors."""

    code: str = "DOMAIN_ERROR"
    http_status: int = 400

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []

    @property
    def public_message(self) -> str:
        return self.message

    def to_response(self) -> Dict[str, Any]:
        """Build the JSON error envelope returned to clients."""
        error: Dict[str, Any] = {"code": self.code, "message": self.public_message}
        if self.details:
            error["details"] = self.details
        return {"error": error}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(DomainError, ValueError):
    """Missing or malformed input; details hold ``{field, message}`` pairs."""

    code = "VALIDATION_ERROR"
    http_status = 400

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message, details=[{"field": field, "message": message}])

    @classmethod
    def for_fields(cls, problems: Sequence[Tuple[str, str]]) -> "ValidationError":
        details = [{"field": field, "message": message} for field, message in problems]
        summary = "; ".join(message for _, message in problems)
        return cls(summary, details=details)


class Unauthorized(DomainError):
    """Credential missing, malformed, expired or not verifiable."""

    code = "UNAUTHORIZED"
    http_status = 401


class Forbidden(DomainError):
    """Authenticated caller does not own the target resource."""

    code = "FORBIDDEN"
    http_status = 403


class NotFound(DomainError):
    code = "NOT_FOUND"
    http_status = 404


class Conflict(DomainError):
    """Domain-level conflict with the current state of an aggregate."""

    code = "CONFLICT"
    http_status = 409


class AlreadyLiked(Conflict):
    code = "ALREADY_LIKED"

    def __init__(self, message: str = "Post already liked") -> None:
        super().__init__(message)


class NotLiked(Conflict):
    code = "NOT_LIKED"

    def __init__(self, message: str = "Post has not yet been liked") -> None:
        super().__init__(message)


class AlreadyRegistered(Conflict):
    code = "ALREADY_REGISTERED"

    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(message)


class ConcurrentModification(Conflict):
    """
    An aggregate changed between read and write.

    Raised by repositories on a failed version check and retried by the
    use case layer; reaches the client only once retries are exhausted.
    """

    code = "CONCURRENT_MODIFICATION"


# -----------------------------------------------------------------------------
# Infrastructure errors
# -----------------------------------------------------------------------------


class StorageFailure(DomainError):
    """The persistence layer is unreachable or rejected the operation."""

    code = "STORAGE_FAILURE"
    http_status = 500

    @property
    def public_message(self) -> str:
        return "A storage error occurred while processing the request"


class PartialDeletion(StorageFailure):
    """
    A cascading delete stopped part-way.

    Steps listed in ``completed_steps`` were applied and are not rolled back.
    """

    code = "PARTIAL_DELETION"

    def __init__(self, completed_steps: List[str], failed_step: str) -> None:
        super().__init__(
            f"Cascading delete failed at step '{failed_step}' after {completed_steps}",
            details=[{"step": step, "status": "completed"} for step in completed_steps]
            + [{"step": failed_step, "status": "failed"}],
        )
        self.completed_steps = list(completed_steps)
        self.failed_step = failed_step

    @property
    def public_message(self) -> str:
        return "Account deletion was only partially completed"

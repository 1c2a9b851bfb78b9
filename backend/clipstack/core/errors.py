"""
Domain exceptions for ClipStack.

Services raise these; the application maps them to HTTP responses in
``clipstack.main``. Each exception renders to the same detail shape the
API returns:

    {"error": "not_found", "message": "Project not found",
     "resource_type": "project", "resource_id": 7}
"""

from typing import Any, Dict, Optional


class ClipStackError(Exception):
    """Base exception for all ClipStack domain errors."""

    error_code = "error"
    status_code = 400

    def __init__(
        self,
        message: str,
        *,
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.field = field

    def to_detail(self) -> Dict[str, Any]:
        detail: Dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.resource_type is not None:
            detail["resource_type"] = self.resource_type
        if self.resource_id is not None:
            detail["resource_id"] = self.resource_id
        if self.field is not None:
            detail["field"] = self.field
        return detail


class NotFoundError(ClipStackError):
    """A referenced entity id does not exist."""

    error_code = "not_found"
    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any, message: Optional[str] = None):
        label = resource_type.replace("_", " ").capitalize()
        super().__init__(
            message or f"{label} not found",
            resource_type=resource_type,
            resource_id=resource_id,
        )


class ConflictError(ClipStackError):
    """A unique constraint would be violated."""

    error_code = "conflict"
    status_code = 409


class ValidationError(ClipStackError):
    """Input violates a field constraint that the request schema could not check."""

    error_code = "validation_error"
    status_code = 422

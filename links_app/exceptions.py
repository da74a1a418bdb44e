"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to. They are rendered as
``{"error": message, "details": ...}`` by the handler registered in main.py,
so routes never build error responses themselves.
"""

from typing import Any, Optional, Sequence


class LinkServiceError(Exception):
    """Base class for every error a request can end with"""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(LinkServiceError):
    """Malformed or missing input"""
    status_code = 400

    # Messages for required fields that clients commonly leave out
    REQUIRED_MESSAGES = {"url": "URL is required"}

    @classmethod
    def from_errors(cls, errors: Sequence[dict]) -> "ValidationError":
        """
        Build from pydantic error dicts.

        The first error names the failure; all of them are kept in details
        without the raw input and exception objects pydantic attaches.
        """
        details = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in errors
        ]
        if not errors:
            return cls("Invalid request")

        first = errors[0]
        loc = first["loc"]
        # json_invalid and list items end their loc with a position, not a name
        field = loc[-1] if loc and isinstance(loc[-1], str) else "body"
        if first["type"] == "json_invalid":
            message = "Invalid JSON body"
        elif first["type"] == "missing":
            message = cls.REQUIRED_MESSAGES.get(field, f"{field} is required")
        elif first["type"] == "value_error" and "error" in first.get("ctx", {}):
            message = str(first["ctx"]["error"])
        else:
            message = f"Invalid {field}: {first['msg']}"
        return cls(message, details=details)


class ConflictError(LinkServiceError):
    """Slug uniqueness violation"""
    status_code = 400


class NotFoundError(LinkServiceError):
    status_code = 404


class ExpiredError(LinkServiceError):
    """Link is past its expiry timestamp"""
    status_code = 410


class PersistenceError(LinkServiceError):
    """
    Underlying store operation failed.

    The store's own message is forwarded as ``details``.
    """
    status_code = 500

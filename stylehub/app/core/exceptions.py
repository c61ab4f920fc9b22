"""Application exception hierarchy.

Every error the API reports deliberately is an ``AppException`` carrying the
HTTP status and a human readable ``detail``. The exception handler registered
in ``app.main`` renders them as ``{"error": detail}``.
"""

from fastapi import status


class AppException(Exception):
    """Base class for errors rendered as ``{"error": detail}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class UnauthorizedError(AppException):
    """No credential, or a credential that failed verification."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required"


class ForbiddenError(AppException):
    """Role or ownership mismatch."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class NotFoundError(AppException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class InvalidIdError(AppException):
    """Malformed identifier syntax."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid ID format"


class ValidationError(AppException):
    """Schema or field-constraint violation."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation failed"


class MethodNotAllowedError(AppException):
    """Operation deliberately disabled at the service boundary."""
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    default_detail = "Method not allowed"


class InternalError(AppException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

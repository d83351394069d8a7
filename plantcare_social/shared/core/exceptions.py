# 📄 File: plantcare_social/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types our app uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# All modules for error handling, exception handlers in main, domain services

from typing import Any, Dict, Optional

from fastapi import status


class PlantCareException(Exception):
    """
    Base exception class for the Plant Care social backend.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the response body format."""
        return {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(PlantCareException):
    """
    Raised when a request carries no usable credential.
    Missing header, wrong scheme or an empty token all land here.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "UNAUTHENTICATED"
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code=error_code
        )


class InvalidCredentialError(AuthenticationError):
    """
    Raised when a credential was presented but cannot be trusted:
    bad signature, expired, or the identity it names no longer exists.
    """

    def __init__(
        self,
        message: str = "Invalid or expired credential",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            details=details,
            error_code="INVALID_CREDENTIAL"
        )


class AuthorizationError(PlantCareException):
    """
    Exception raised for authorization failures.
    Used when a user acts on a resource they do not own.
    """

    def __init__(
        self,
        message: str = "Access denied",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="AUTHORIZATION_ERROR"
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(PlantCareException):
    """
    Exception raised for invalid input.
    Used when a required field is missing or a value breaks a rule.
    """

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "INVALID_INPUT"
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code=error_code
        )


class SelfFollowRejectedError(ValidationError):
    """Raised when a user tries to follow themselves."""

    def __init__(self, identity: str):
        super().__init__(
            message="You cannot follow yourself",
            details={"identity": identity},
            error_code="SELF_FOLLOW_REJECTED"
        )


class AlreadyFollowingError(ValidationError):
    """Raised when the follow edge already exists."""

    def __init__(self, follower: str, followed: str):
        super().__init__(
            message="Already following this user",
            details={"follower": follower, "followed": followed},
            error_code="ALREADY_FOLLOWING"
        )


class NotFoundError(PlantCareException):
    """
    Exception raised when requested resource is not found.
    Used for missing users, posts, notifications, plants.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class ConflictError(PlantCareException):
    """
    Exception raised for resource conflicts.
    Used when attempting to create duplicate resources.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: Optional[str] = None,
        conflict_field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if conflict_field:
            details["conflict_field"] = conflict_field

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="CONFLICT_ERROR"
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class UpstreamServiceError(PlantCareException):
    """
    Exception raised when an external service call fails.
    The message is what the user sees, so it never carries raw upstream text.
    """

    def __init__(
        self,
        message: str = "I apologize, but I'm having trouble reaching an external service. Please try again in a moment.",
        service: Optional[str] = None,
        upstream_status: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if service:
            details["service"] = service
        if upstream_status:
            details["upstream_status"] = upstream_status

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="UPSTREAM_FAILURE"
        )


class APITimeoutError(UpstreamServiceError):
    """Exception raised when an external API call exceeds its bounded wait."""

    def __init__(self, service: str, timeout_seconds: float):
        super().__init__(
            message=f"I apologize, but the {service} service took too long to answer. Please try again.",
            service=service,
            details={"timeout_seconds": timeout_seconds}
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(PlantCareException):
    """
    Exception raised for database operation failures.
    Used for connection issues, query failures, commit failures.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="PERSISTENCE_FAILURE"
        )

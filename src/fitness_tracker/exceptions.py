"""
Custom exceptions for the Fitness Tracker.

Every registry failure is a caller input or state error. Each exception
carries:
- A descriptive message
- An error code
- Optional details for debugging

None of them are retryable; the interactive shell reports them and moves on.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"

    # User errors
    DUPLICATE_USER = "DUPLICATE_USER"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_ATTRIBUTE = "INVALID_ATTRIBUTE"

    # Workout errors
    INVALID_WORKOUT = "INVALID_WORKOUT"


class FitnessTrackerError(Exception):
    """
    Base exception for all Fitness Tracker errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = dict(details or {})
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors
# ============================================================================

class ValidationError(FitnessTrackerError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = dict(details or {})
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details,
        )


class InvalidAttributeError(ValidationError):
    """Raised when a user attribute is out of range or not updatable."""

    def __init__(
        self,
        message: str = "Age, weight, and height must be positive values.",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, field=field, details=details)
        self.code = ErrorCode.INVALID_ATTRIBUTE


class InvalidWorkoutError(ValidationError):
    """Raised when a workout has a non-positive duration or negative calories."""

    def __init__(
        self,
        message: str = "Workout duration must be positive and calories burned cannot be negative.",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, field=field, details=details)
        self.code = ErrorCode.INVALID_WORKOUT


# ============================================================================
# Not Found Errors
# ============================================================================

class NotFoundError(FitnessTrackerError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        message = f"{resource_type} with ID {resource_id} not found."
        error_details = dict(details or {})
        error_details["resource_type"] = resource_type
        error_details["resource_id"] = resource_id
        super().__init__(
            message=message,
            code=ErrorCode.NOT_FOUND,
            details=error_details,
        )


class UserNotFoundError(NotFoundError):
    """Raised when an operation references a user id that is not registered."""

    def __init__(self, user_id: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            resource_type="User",
            resource_id=user_id,
            details=details,
        )
        self.user_id = user_id
        self.code = ErrorCode.USER_NOT_FOUND


# ============================================================================
# Conflict Errors
# ============================================================================

class ConflictError(FitnessTrackerError):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CONFLICT,
            details=details,
        )


class DuplicateUserError(ConflictError):
    """Raised when a user is created with an id that is already in use."""

    def __init__(self, user_id: str, details: Optional[Dict[str, Any]] = None) -> None:
        error_details = dict(details or {})
        error_details["user_id"] = user_id
        super().__init__(
            message=f"User with ID {user_id} already exists.",
            details=error_details,
        )
        self.user_id = user_id
        self.code = ErrorCode.DUPLICATE_USER

"""
Standardized exception handling system for the Unit Master service.

This module provides:
- Custom exception classes tagged with an error category
- Error codes and categories
- Standardized error response formatting
- Raise-helpers for the common error scenarios
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, asdict
from datetime import datetime, timezone

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


class ErrorCategory(Enum):
    """Error categories for better error classification."""
    VALIDATION = "validation"
    BUSINESS_LOGIC = "business_logic"
    NOT_FOUND = "not_found"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Standardized error codes."""
    # Validation errors (1000-1999)
    INVALID_INPUT = ("INVALID_INPUT", 1001, "Invalid input provided")
    MISSING_REQUIRED_FIELD = ("MISSING_REQUIRED_FIELD", 1002, "Required field is missing")
    INVALID_FORMAT = ("INVALID_FORMAT", 1003, "Invalid format")
    INVALID_FILE = ("INVALID_FILE", 1004, "Uploaded file is not acceptable")

    # Business logic errors (2000-2999)
    BUSINESS_RULE_VIOLATION = ("BUSINESS_RULE_VIOLATION", 2001, "Business rule violated")

    # Not found errors (3000-3999)
    RESOURCE_NOT_FOUND = ("RESOURCE_NOT_FOUND", 3001, "Requested resource was not found")

    # System errors (7000-7999)
    INTERNAL_SERVER_ERROR = ("INTERNAL_SERVER_ERROR", 7001, "Internal server error")
    CRYPTOGRAPHY_ERROR = ("CRYPTOGRAPHY_ERROR", 7002, "Cryptographic operation failed")

    def __init__(self, code: str, number: int, message: str):
        self.code = code
        self.number = number
        self.message = message


@dataclass
class ErrorDetail:
    """Detailed error information."""
    field: Optional[str] = None
    message: str = ""
    code: Optional[str] = None
    value: Optional[Any] = None


@dataclass
class ErrorResponse:
    """Standardized error response format."""
    success: bool = False
    error_code: str = ""
    error_number: int = 0
    message: str = ""
    details: List[ErrorDetail] = None
    category: str = ""
    timestamp: str = ""
    trace_id: Optional[str] = None
    path: Optional[str] = None
    notification: Optional[Dict[str, str]] = None
    redirect_to: Optional[str] = None

    def __post_init__(self):
        if self.details is None:
            self.details = []
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = asdict(self)
        result['details'] = [asdict(detail) for detail in self.details]
        return result


class BaseAPIException(Exception):
    """Base exception class for all classified errors."""

    def __init__(
        self,
        error_code: ErrorCode,
        category: ErrorCategory,
        message: Optional[str] = None,
        details: Optional[List[ErrorDetail]] = None,
        trace_id: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.error_code = error_code
        self.category = category
        self.message = message or error_code.message
        self.details = details or []
        self.trace_id = trace_id
        self.original_exception = original_exception
        # Set by callers that render the error back to a form
        self.notification: Optional[Dict[str, str]] = None
        self.redirect_to: Optional[str] = None

        super().__init__(self.message)

    def to_error_response(self, path: Optional[str] = None) -> ErrorResponse:
        """Convert exception to standardized error response."""
        return ErrorResponse(
            error_code=self.error_code.code,
            error_number=self.error_code.number,
            message=self.message,
            details=self.details,
            category=self.category.value,
            trace_id=self.trace_id,
            path=path,
            notification=self.notification,
            redirect_to=self.redirect_to
        )


class ValidationException(BaseAPIException):
    """Exception for validation errors."""

    def __init__(
        self,
        message: str,
        details: Optional[List[ErrorDetail]] = None,
        error_code: ErrorCode = ErrorCode.INVALID_INPUT,
        trace_id: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            error_code=error_code,
            category=ErrorCategory.VALIDATION,
            message=message,
            details=details,
            trace_id=trace_id,
            original_exception=original_exception
        )


class BusinessLogicException(BaseAPIException):
    """Exception for business rule violations."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: Optional[List[ErrorDetail]] = None,
        trace_id: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            error_code=error_code,
            category=ErrorCategory.BUSINESS_LOGIC,
            message=message,
            details=details,
            trace_id=trace_id,
            original_exception=original_exception
        )


class NotFoundException(BaseAPIException):
    """Exception for a referenced entity that does not exist."""

    def __init__(
        self,
        entity_name: str,
        key: Any,
        error_code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
        details: Optional[List[ErrorDetail]] = None,
        trace_id: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.entity_name = entity_name
        self.key = key
        super().__init__(
            error_code=error_code,
            category=ErrorCategory.NOT_FOUND,
            message=f"{entity_name} with identifier '{key}' was not found.",
            details=details,
            trace_id=trace_id,
            original_exception=original_exception
        )


class InternalException(BaseAPIException):
    """Exception for unexpected failures (I/O, cryptography, anything unclassified)."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR,
        details: Optional[List[ErrorDetail]] = None,
        trace_id: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            error_code=error_code,
            category=ErrorCategory.SYSTEM,
            message=message,
            details=details,
            trace_id=trace_id,
            original_exception=original_exception
        )


def raise_validation_error(
    message: str,
    field: Optional[str] = None,
    value: Optional[Any] = None,
    error_code: ErrorCode = ErrorCode.INVALID_INPUT
):
    """Raise a validation error with optional field details."""
    details = []
    if field:
        details.append(ErrorDetail(field=field, message=message, value=value))

    raise ValidationException(message=message, details=details, error_code=error_code)


def raise_business_error(message: str, error_code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION):
    """Raise a business logic error."""
    raise BusinessLogicException(message=message, error_code=error_code)


def raise_not_found_error(entity_name: str, key: Any):
    """Raise a not-found error for ``entity_name`` identified by ``key``."""
    raise NotFoundException(entity_name=entity_name, key=key)


def handle_unexpected_error(
    error: Exception,
    trace_id: Optional[str] = None
) -> InternalException:
    """
    Wrap an unexpected error in an ``InternalException`` safe to return to clients.

    The client only sees ``UNEXPECTED_ERROR_MESSAGE``; the cause stays in
    ``original_exception`` for logging.
    """
    return InternalException(
        message=UNEXPECTED_ERROR_MESSAGE,
        trace_id=trace_id,
        original_exception=error
    )

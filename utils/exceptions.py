"""
Custom Application Exceptions.

Provides a hierarchy of exceptions for consistent error handling.

Usage:
    from utils.exceptions import DateFormatError, ValidationError

    # In date helpers
    raise DateFormatError("31.02.2022", expected_formats=["dd.MM.yyyy"])

    # In RNOKPP helpers
    raise ValidationError("RNOKPP code must contain exactly 10 digits", field="rnokpp")
"""
from typing import Optional, Dict, Any, List


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (e.g., "DATE_FORMAT_ERROR")
        status_code: HTTP status code to return
        details: Additional context for debugging
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "status": "error",
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class DateFormatError(AppError):
    """
    Date/time text does not match any accepted layout.

    Use for: unparseable dates, impossible calendar dates, date-time strings
    without a time part, malformed HH:MM[:SS] values.
    """
    def __init__(
        self,
        value: Optional[str],
        expected_formats: Optional[List[str]] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.value = value
        self.expected_formats = list(expected_formats or [])
        _details = details or {}
        _details["value"] = value
        if self.expected_formats:
            _details["expected_formats"] = self.expected_formats
        if message is None:
            shown = value.strip() if isinstance(value, str) else value
            message = f'Failed to parse date string: "{shown}"'
            if self.expected_formats:
                message += ". Expected formats: " + ", ".join(self.expected_formats)
        super().__init__(message, "DATE_FORMAT_ERROR", status_code=400, details=_details)


class ValidationError(AppError):
    """
    Input validation failed.

    Use for: RNOKPP code that is not exactly 10 digits, missing required value.
    """
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        _details = details or {}
        if field:
            _details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", status_code=422, details=_details)

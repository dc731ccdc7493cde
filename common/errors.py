"""
Shared error codes and error handling utilities for the Portfolio Backend API.
Provides consistent error responses across all endpoints.
"""

from fastapi import HTTPException
from typing import Dict, Any, List, Optional, Union


# Error codes for consistent API responses
class ErrorCodes:
    """Standard error codes used across the API."""

    # General errors
    INTERNAL_SERVER_ERROR = "internal_server_error"
    INVALID_REQUEST = "invalid_request"

    # Auth errors
    INVALID_PASSWORD = "invalid_password"
    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"

    # Section errors
    INVALID_SECTION = "invalid_section"
    SECTION_NOT_FOUND = "section_not_found"
    VALIDATION_FAILED = "validation_failed"

    # File upload errors
    NO_FILES = "no_files"
    INVALID_CSV = "invalid_csv"
    FILE_TOO_LARGE = "file_too_large"
    TOO_MANY_FILES = "too_many_files"

    # Categorization errors
    INVALID_CATEGORIZATION = "invalid_categorization"


class StorageError(IOError):
    """Raised when a section file cannot be read, parsed or written."""
    pass


class SectionNotFoundError(StorageError):
    """Raised when a section file does not exist in the data directory."""

    def __init__(self, section: str):
        super().__init__(f"Section '{section}' not found")
        self.section = section


class CsvParseError(ValueError):
    """Raised when an uploaded CSV file lacks the rows its kind requires."""
    pass


def create_error_detail(
    message: str,
    code: str,
    details: Optional[Union[Dict[str, Any], List[Any], str]] = None
) -> Dict[str, Any]:
    """
    Create a standardized error detail dictionary.

    Args:
        message: Short human-readable error message
        code: Machine-readable error code
        details: Optional payload (validation messages, exception text, ...)

    Returns:
        Standardized error detail dictionary
    """
    detail = {
        "error": message,
        "code": code
    }

    if details:
        detail["details"] = details

    return detail


def raise_invalid_section(section: str) -> None:
    """Raise a standardized 400 error for unknown section names."""
    raise HTTPException(
        status_code=400,
        detail=create_error_detail(
            message=f"Invalid section: {section}",
            code=ErrorCodes.INVALID_SECTION
        )
    )


def raise_section_not_found(section: str) -> None:
    """Raise a standardized 404 error for missing sections."""
    raise HTTPException(
        status_code=404,
        detail=create_error_detail(
            message=f"Section '{section}' not found",
            code=ErrorCodes.SECTION_NOT_FOUND
        )
    )


def raise_validation_failed(details: Union[Dict[str, List[str]], List[str]]) -> None:
    """Raise a standardized 400 error carrying schema validation messages."""
    raise HTTPException(
        status_code=400,
        detail=create_error_detail(
            message="Validation failed",
            code=ErrorCodes.VALIDATION_FAILED,
            details=details
        )
    )


def raise_invalid_password() -> None:
    """Raise a standardized 401 error for a wrong admin password."""
    raise HTTPException(
        status_code=401,
        detail=create_error_detail(
            message="Invalid password",
            code=ErrorCodes.INVALID_PASSWORD
        )
    )


def raise_missing_token() -> None:
    """Raise a standardized 401 error when no bearer token was sent."""
    raise HTTPException(
        status_code=401,
        detail=create_error_detail(
            message="Access token required",
            code=ErrorCodes.MISSING_TOKEN
        ),
        headers={"WWW-Authenticate": "Bearer"}
    )


def raise_invalid_token(reason: str) -> None:
    """Raise a standardized 403 error for expired or tampered tokens."""
    raise HTTPException(
        status_code=403,
        detail=create_error_detail(
            message="Invalid or expired token",
            code=ErrorCodes.INVALID_TOKEN,
            details=reason
        )
    )


def raise_no_files() -> None:
    """Raise a standardized 400 error when an import request carries no files."""
    raise HTTPException(
        status_code=400,
        detail=create_error_detail(
            message="No CSV files uploaded",
            code=ErrorCodes.NO_FILES
        )
    )


def raise_invalid_csv(
    message: str,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """Raise a standardized 400 error for uploads that are not CSV files."""
    raise HTTPException(
        status_code=400,
        detail=create_error_detail(
            message=f"Invalid CSV file: {message}",
            code=ErrorCodes.INVALID_CSV,
            details=details
        )
    )


def raise_file_too_large(filename: str, max_bytes: int) -> None:
    """Raise a standardized 400 error for uploads above the size limit."""
    raise HTTPException(
        status_code=400,
        detail=create_error_detail(
            message=f"File '{filename}' exceeds the {max_bytes // (1024 * 1024)}MB limit",
            code=ErrorCodes.FILE_TOO_LARGE,
            details={"filename": filename, "max_bytes": max_bytes}
        )
    )


def raise_too_many_files(count: int, max_files: int) -> None:
    """Raise a standardized 400 error when the upload count cap is exceeded."""
    raise HTTPException(
        status_code=400,
        detail=create_error_detail(
            message=f"Too many files: {count} uploaded, at most {max_files} allowed",
            code=ErrorCodes.TOO_MANY_FILES,
            details={"count": count, "max_files": max_files}
        )
    )


def raise_invalid_categorization(details: Any = None) -> None:
    """Raise a standardized 400 error for malformed categorization preferences."""
    raise HTTPException(
        status_code=400,
        detail=create_error_detail(
            message="Invalid categorization preferences",
            code=ErrorCodes.INVALID_CATEGORIZATION,
            details=details
        )
    )


def raise_invalid_request(message: str, details: Any = None) -> None:
    """Raise a standardized 400 error for malformed request bodies."""
    raise HTTPException(
        status_code=400,
        detail=create_error_detail(
            message=message,
            code=ErrorCodes.INVALID_REQUEST,
            details=details
        )
    )


def raise_internal_server_error(
    message: str,
    details: Optional[Union[Dict[str, Any], str]] = None
) -> None:
    """Raise a standardized 500 error for internal server errors."""
    raise HTTPException(
        status_code=500,
        detail=create_error_detail(
            message=message,
            code=ErrorCodes.INTERNAL_SERVER_ERROR,
            details=details
        )
    )

"""Exception classes for the SendGrid template exporter.

This module defines custom exception classes used throughout the application
for proper error handling and user feedback.
"""

from typing import Optional, Dict, Any


class SendgridmanError(Exception):
    """Base exception class for all exporter errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(SendgridmanError):
    """Exception raised for invalid command-line settings."""
    pass


class WorkingDirectoryError(SendgridmanError):
    """Exception raised when the current working directory cannot be resolved."""
    pass


class RemoteError(SendgridmanError):
    """Base exception for SendGrid API request failures."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code, None for transport failures
            response_data: Raw response data from API
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}


class UnauthorizedError(RemoteError):
    """Exception raised for 401 Unauthorized errors."""
    pass


class ForbiddenError(RemoteError):
    """Exception raised for 403 Forbidden errors."""
    pass


class NotFoundError(RemoteError):
    """Exception raised for 404 Not Found errors."""
    pass


class RateLimitError(RemoteError):
    """Exception raised for 429 Rate Limit errors."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[int] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            retry_after: Seconds to wait before retrying
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(RemoteError):
    """Exception raised for 5xx server errors."""
    pass


class DecodeError(SendgridmanError):
    """Exception raised when a response body cannot be decoded."""
    pass


class EmptyTemplateError(SendgridmanError):
    """Exception raised when a template has no versions."""

    def __init__(self, message: str, template_id: Optional[str] = None) -> None:
        super().__init__(message, details={"template_id": template_id})
        self.template_id = template_id


class StoreError(SendgridmanError):
    """Exception raised when template content cannot be written to disk."""

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        version_id: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            template_id: Template being stored
            version_id: Version being stored
            path: File that could not be written
        """
        super().__init__(
            message,
            details={"template_id": template_id, "version_id": version_id, "path": path},
        )
        self.template_id = template_id
        self.version_id = version_id
        self.path = path

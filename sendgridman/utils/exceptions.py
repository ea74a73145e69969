"""User-facing formatting of exporter errors."""

from ..exceptions import (
    DecodeError,
    EmptyTemplateError,
    RateLimitError,
    RemoteError,
    StoreError,
)


def format_error_for_user(error: Exception, debug: bool = False) -> str:
    """Format an error message for user display.

    Args:
        error: The exception to format
        debug: Whether to include debug information

    Returns:
        Formatted error message
    """
    if isinstance(error, StoreError):
        message = f"File error: {error.message}"
        if debug and error.__cause__ is not None:
            message += f"\nCause: {type(error.__cause__).__name__}: {error.__cause__}"
        return message

    if isinstance(error, EmptyTemplateError):
        return f"Empty template: {error.message}"

    if isinstance(error, RateLimitError):
        message = f"Rate limit exceeded: {error.message}"
        if error.retry_after:
            message += f"\nRetry after: {error.retry_after} seconds"
        return message

    # For API errors, show status code and response data if available
    if isinstance(error, RemoteError):
        message = f"API error: {error.message}"
        if error.status_code:
            message += f"\nStatus code: {error.status_code}"
        if error.response_data and debug:
            message += f"\nResponse: {error.response_data}"
        return message

    if isinstance(error, DecodeError):
        return f"Invalid response: {error.message}"

    # Default formatting
    if debug:
        return f"Error: {str(error)}\nType: {type(error).__name__}"
    else:
        return f"Error: {str(error)}"

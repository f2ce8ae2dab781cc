"""Custom exceptions for the letter relay.

This module provides structured error handling with specific exception types
for different failure scenarios. All exceptions inherit from LetterRelayError.
"""
from typing import Optional, Any

from .constants import MSG_TOKEN_REQUIRED


class LetterRelayError(Exception):
    """Base exception for all letter relay errors.

    Attributes:
        message: Human-readable error description.
        file_id: Optional file ID related to the error.
    """

    def __init__(self, message: str, file_id: Optional[str] = None) -> None:
        self.message = message
        self.file_id = file_id
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format the error message, optionally including file ID."""
        if self.file_id:
            return f"{self.message} (file: {self.file_id})"
        return self.message


class AuthenticationError(LetterRelayError):
    """Raised when the bearer token is rejected or expired."""
    pass


class NotFoundError(LetterRelayError):
    """Raised when a requested document or folder doesn't exist."""
    pass


class PermissionDeniedError(LetterRelayError):
    """Raised when access to a file is denied."""
    pass


class QuotaExceededError(LetterRelayError):
    """Raised when API rate limit or quota is exceeded."""
    pass


class OAuthConfigurationError(LetterRelayError):
    """Raised when the OAuth client id or secret is not configured."""
    pass


class MissingFieldError(LetterRelayError):
    """Raised when a request omits one or more required fields.

    Attributes:
        fields: Names of the missing fields.
    """

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


class MissingCredentialError(LetterRelayError):
    """Raised when a request carries no access token."""

    def __init__(self) -> None:
        super().__init__(MSG_TOKEN_REQUIRED)


def handle_http_error(error: Any, file_id: Optional[str] = None) -> LetterRelayError:
    """Convert googleapiclient HttpError to a specific exception.

    Args:
        error: The HttpError from googleapiclient.
        file_id: Optional file ID for context.

    Returns:
        An appropriate LetterRelayError subclass.
    """
    try:
        status = error.resp.status
    except AttributeError:
        return LetterRelayError(f"API error: {str(error)}", file_id)

    if status == 401:
        return AuthenticationError(
            "Authentication failed. The access token is invalid or expired.",
            file_id
        )
    elif status == 403:
        return PermissionDeniedError(
            "Access denied. The token lacks the scope or the file is not shared.",
            file_id
        )
    elif status == 404:
        return NotFoundError(
            "File not found. It may have been deleted or moved.",
            file_id
        )
    elif status == 429:
        return QuotaExceededError(
            "API quota exceeded.",
            file_id
        )
    else:
        return LetterRelayError(f"API error (HTTP {status}): {str(error)}", file_id)


def format_error(action: str, error: Exception) -> str:
    """Format an error message consistently.

    Args:
        action: The action that failed (e.g., "Create document").
        error: The exception that occurred.

    Returns:
        Formatted error string.
    """
    if isinstance(error, LetterRelayError):
        return f"{action} failed: {error.format_message()}"
    return f"{action} failed: {str(error)}"

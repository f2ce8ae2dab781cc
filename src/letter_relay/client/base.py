"""Base client with Google API service initialization."""
from typing import Any, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build


def escape_query_value(value: str) -> str:
    """Escape a literal for use inside a quoted Drive query string."""
    return value.replace('\\', '\\\\').replace("'", "\\'")


class LettersClientBase:
    """Base class holding the Drive and Docs services for one bearer token."""

    def __init__(
        self,
        credentials: Credentials,
        drive_service: Optional[Any] = None,
        docs_service: Optional[Any] = None,
    ) -> None:
        """Initialize the client with authenticated Google API services.

        Args:
            credentials: Credentials wrapping the caller's access token.
            drive_service: Prebuilt Drive v3 resource, built if omitted.
            docs_service: Prebuilt Docs v1 resource, built if omitted.
        """
        self.creds = credentials
        self.drive_service = drive_service or build(
            'drive', 'v3', credentials=credentials, cache_discovery=False
        )
        self.docs_service = docs_service or build(
            'docs', 'v1', credentials=credentials, cache_discovery=False
        )

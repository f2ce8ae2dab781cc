"""
Google OAuth package for the letter relay.

Builds consent URLs and exchanges authorization codes. Tokens are passed
through to the client application and never stored.
"""

from .scopes import SCOPES, get_scopes
from .google_auth import (
    build_authorization_url,
    build_client_redirect,
    check_client_secrets,
    create_oauth_flow,
    exchange_code,
)

__all__ = [
    # Scopes
    "SCOPES",
    "get_scopes",
    # Auth Functions
    "build_authorization_url",
    "build_client_redirect",
    "check_client_secrets",
    "create_oauth_flow",
    "exchange_code",
]

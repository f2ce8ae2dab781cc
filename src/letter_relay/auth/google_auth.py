"""
Core Google OAuth logic for the letter relay.

Builds the consent URL and exchanges the authorization code for tokens.
Tokens are handed straight back to the client application; nothing is
stored, so each leg of the flow builds its own Flow from the immutable
configuration and PKCE is left off.
"""

import logging
from typing import List, Optional
from urllib.parse import urlencode, urlsplit

from google_auth_oauthlib.flow import Flow

from .scopes import get_scopes
from ..core.config import RelayConfig
from ..models import TokenPair
from ..utils.errors import OAuthConfigurationError

logger = logging.getLogger(__name__)


def check_client_secrets(config: RelayConfig) -> Optional[str]:
    """
    Check if OAuth client credentials are configured.

    Returns:
        Error message if they are missing, None otherwise.
    """
    if config.is_oauth_configured():
        return None
    return (
        "OAuth client credentials not found. Set GOOGLE_CLIENT_ID and "
        "GOOGLE_CLIENT_SECRET in the environment or in .env"
    )


def create_oauth_flow(config: RelayConfig, scopes: Optional[List[str]] = None) -> Flow:
    """
    Create an OAuth web flow from the relay configuration.

    Args:
        config: Relay configuration holding the client id, secret and redirect URI.
        scopes: OAuth scopes, defaults to the relay's scopes.

    Returns:
        Configured OAuth Flow object

    Raises:
        OAuthConfigurationError: If the client id or secret is missing.
    """
    error_message = check_client_secrets(config)
    if error_message:
        raise OAuthConfigurationError(error_message)

    return Flow.from_client_config(
        config.client_config(),
        scopes=scopes or get_scopes(),
        redirect_uri=config.redirect_uri,
        autogenerate_code_verifier=False,
    )


def build_authorization_url(config: RelayConfig) -> str:
    """
    Build the Google consent URL.

    Requests offline access and forces the consent screen so a refresh
    token is issued on every login.

    Returns:
        The authorization URL.
    """
    flow = create_oauth_flow(config)
    auth_url, _ = flow.authorization_url(access_type="offline", prompt="consent")
    return auth_url


def exchange_code(config: RelayConfig, code: str) -> TokenPair:
    """
    Exchange an authorization code for tokens.

    Args:
        config: Relay configuration.
        code: Authorization code from the callback query.

    Returns:
        The access token and, when issued, the refresh token.

    Raises:
        ValueError: If the code is empty or no access token comes back.
    """
    if not code:
        raise ValueError("No authorization code received from Google")

    flow = create_oauth_flow(config)
    token = flow.fetch_token(code=code)

    access_token = token.get("access_token")
    if not access_token:
        raise ValueError("Token response did not include an access token")

    logger.info("Successfully exchanged authorization code for tokens")
    return TokenPair(
        access_token=access_token,
        refresh_token=token.get("refresh_token"),
    )


def build_client_redirect(config: RelayConfig, tokens: TokenPair) -> str:
    """
    Build the client URL carrying the tokens as query parameters.

    Returns:
        The redirect target for the browser.
    """
    query = urlencode(
        {
            "access_token": tokens.access_token,
            "refresh_token": tokens.refresh_token or "",
        }
    )
    separator = "&" if urlsplit(config.client_url).query else "?"
    return f"{config.client_url}{separator}{query}"

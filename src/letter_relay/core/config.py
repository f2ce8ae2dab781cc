"""
Configuration for the letter relay.

The configuration is read once at process start into an immutable
RelayConfig value that is handed to the application factory.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_CLIENT_URL = "http://localhost:3000"

GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"
GOOGLE_CERTS_URI = "https://www.googleapis.com/oauth2/v1/certs"


@dataclass(frozen=True)
class RelayConfig:
    """
    Immutable relay configuration.

    Holds the OAuth client settings, the client application URL used for
    CORS and the post-login redirect, and the server bind address.
    """

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redirect_uri: str = f"http://localhost:{DEFAULT_PORT}/api/auth/google/callback"
    client_url: str = DEFAULT_CLIENT_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "RelayConfig":
        """
        Build the configuration from environment variables.

        Args:
            load_env_file: Load a .env file into the environment first.

        Returns:
            A RelayConfig populated from the environment.
        """
        if load_env_file:
            load_dotenv()

        port = int(os.getenv("PORT", str(DEFAULT_PORT)))
        return cls(
            client_id=os.getenv("GOOGLE_CLIENT_ID") or None,
            client_secret=os.getenv("GOOGLE_CLIENT_SECRET") or None,
            redirect_uri=os.getenv(
                "GOOGLE_REDIRECT_URI",
                f"http://localhost:{port}/api/auth/google/callback",
            ),
            client_url=os.getenv("CLIENT_URL", DEFAULT_CLIENT_URL),
            host=os.getenv("HOST", DEFAULT_HOST),
            port=port,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def is_oauth_configured(self) -> bool:
        """Check if OAuth client credentials are present."""
        return bool(self.client_id and self.client_secret)

    def client_config(self) -> Dict[str, Any]:
        """
        Render the client secrets structure google-auth-oauthlib expects.

        Returns:
            A {"web": {...}} client configuration dict.
        """
        return {
            "web": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": GOOGLE_AUTH_URI,
                "token_uri": GOOGLE_TOKEN_URI,
                "auth_provider_x509_cert_url": GOOGLE_CERTS_URI,
                "redirect_uris": [self.redirect_uri],
            }
        }

    def get_environment_summary(self) -> Dict[str, Any]:
        """Get a summary of the current configuration (excluding secrets)."""
        return {
            "redirect_uri": self.redirect_uri,
            "client_url": self.client_url,
            "bind": f"{self.host}:{self.port}",
            "client_configured": self.is_oauth_configured(),
            "log_level": self.log_level,
        }

"""Letter Relay - Google Docs letter storage behind a small HTTP API.

This package lets a client application sign a user in with Google and then
create, list and read letters kept as Google Docs in a "Letters" folder of
the user's Drive.
"""
from .client import LettersClient, authorize
from .core.config import RelayConfig

__version__ = "0.1.0"
__all__ = ["LettersClient", "authorize", "RelayConfig"]

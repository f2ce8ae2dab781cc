"""Google Drive letters client.

This module provides a facade that combines the client mixins into a single
LettersClient class, and the authorize() entry point that builds one from a
bearer token.
"""
from google.oauth2.credentials import Credentials

from .base import LettersClientBase
from .folders import FoldersMixin
from .documents import DocumentsMixin, extract_text_from_element
from .files import FilesMixin


class LettersClient(
    LettersClientBase,
    FoldersMixin,
    DocumentsMixin,
    FilesMixin,
):
    """Drive and Docs client acting on behalf of one access token."""
    pass


def authorize(access_token: str) -> LettersClient:
    """Wrap a bearer token into an authorized client.

    The token is neither validated nor refreshed; a bad token only shows up
    as a failure on the first API call. Nothing is cached or fetched, so
    calling this on every request is safe.

    Args:
        access_token: The caller's OAuth access token.

    Returns:
        A LettersClient bound to the token.
    """
    return LettersClient(Credentials(token=access_token))


__all__ = ['LettersClient', 'authorize', 'extract_text_from_element']

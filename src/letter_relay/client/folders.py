"""Folder lookup mixin for LettersClient."""
import logging
from typing import Optional

from .base import escape_query_value
from ..models import FolderReference
from ..utils.constants import GOOGLE_MIME_TYPES, FOLDER_FIELDS

logger = logging.getLogger(__name__)


class FoldersMixin:
    """Mixin locating and creating the storage folder."""

    def find_folder(self, name: str) -> Optional[FolderReference]:
        """Find a non-trashed folder by exact name.

        When several folders share the name, the first one Drive returns
        wins. Drive does not guarantee that order.

        Args:
            name: Folder name.

        Returns:
            The first matching folder, or None.
        """
        query = (
            f"mimeType='{GOOGLE_MIME_TYPES['folder']}' "
            f"and name='{escape_query_value(name)}' and trashed=false"
        )
        results = self.drive_service.files().list(
            q=query,
            fields=FOLDER_FIELDS
        ).execute()

        files = results.get('files', [])
        if not files:
            return None
        first = files[0]
        return FolderReference(id=first['id'], name=first.get('name', name))

    def create_folder(self, name: str) -> FolderReference:
        """Create a folder in the root of My Drive.

        Args:
            name: Folder name.

        Returns:
            The new folder.
        """
        file_metadata = {
            'name': name,
            'mimeType': GOOGLE_MIME_TYPES['folder']
        }
        folder = self.drive_service.files().create(
            body=file_metadata,
            fields='id'
        ).execute()

        logger.info(f"Created folder '{name}' ({folder['id']})")
        return FolderReference(id=folder['id'], name=name)

    def ensure_folder(self, name: str) -> FolderReference:
        """Return the named folder, creating it when none exists.

        Two concurrent callers can both miss and both create.

        Args:
            name: Folder name.

        Returns:
            The existing or newly created folder.
        """
        folder = self.find_folder(name)
        if folder is not None:
            logger.debug(f"Reusing folder '{name}' ({folder.id})")
            return folder
        return self.create_folder(name)

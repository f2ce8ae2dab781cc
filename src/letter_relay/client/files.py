"""File placement and listing mixin for LettersClient."""
from ..models import LetterSummary
from ..utils.constants import GOOGLE_MIME_TYPES, LETTER_LIST_FIELDS, PARENT_FIELDS
from .base import escape_query_value


class FilesMixin:
    """Mixin providing parent updates and folder listings."""

    def add_parent(self, file_id: str, folder_id: str) -> None:
        """Add a folder to a file's parents. Existing parents are kept.

        Args:
            file_id: The file ID.
            folder_id: Folder to add as a parent.
        """
        self.drive_service.files().update(
            fileId=file_id,
            addParents=folder_id,
            fields=PARENT_FIELDS
        ).execute()

    def list_documents(self, folder_id: str) -> list[LetterSummary]:
        """List the non-trashed Google Docs inside a folder.

        Args:
            folder_id: The folder ID.

        Returns:
            Letter summaries in the order Drive returns them.
        """
        query = (
            f"'{escape_query_value(folder_id)}' in parents "
            f"and mimeType='{GOOGLE_MIME_TYPES['doc']}' and trashed=false"
        )
        results = self.drive_service.files().list(
            q=query,
            fields=LETTER_LIST_FIELDS
        ).execute()

        return [LetterSummary.from_drive_file(item) for item in results.get('files', [])]

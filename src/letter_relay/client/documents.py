"""Document operations mixin for LettersClient."""
import logging
from typing import Any, Optional

from ..models import Letter
from ..utils.constants import DOCUMENT_START_INDEX

logger = logging.getLogger(__name__)


def extract_text_from_element(content: Optional[list[dict[str, Any]]]) -> str:
    """Flatten a Google Doc content element list to plain text.

    Text runs are concatenated in document order without separators.
    Anything that is not a paragraph (tables, section breaks, tables of
    contents) is skipped.

    Args:
        content: The 'content' list of a document body, or None.

    Returns:
        Extracted text string.
    """
    text = ""
    for item in content or []:
        paragraph = item.get('paragraph')
        if not paragraph:
            continue
        for elem in paragraph.get('elements', []):
            text_run = elem.get('textRun')
            if text_run and text_run.get('content'):
                text += text_run['content']
    return text


class DocumentsMixin:
    """Mixin providing document creation and reading."""

    def create_document(self, title: str) -> str:
        """Create an empty Google Doc.

        Args:
            title: Document title.

        Returns:
            The new document ID.
        """
        doc = self.docs_service.documents().create(
            body={'title': title}
        ).execute()

        document_id = doc['documentId']
        logger.info(f"Created document {document_id}")
        return document_id

    def insert_text(self, document_id: str, text: str, index: int = DOCUMENT_START_INDEX) -> None:
        """Insert text as a single run in one batch update.

        Args:
            document_id: The document ID.
            text: Text to insert.
            index: Insertion index. 1 is the start of the body.
        """
        requests = [{
            'insertText': {
                'location': {'index': index},
                'text': text
            }
        }]

        self.docs_service.documents().batchUpdate(
            documentId=document_id, body={'requests': requests}
        ).execute()

    def get_doc_structure(self, document_id: str) -> dict[str, Any]:
        """Fetch the full document resource from the Docs API."""
        return self.docs_service.documents().get(documentId=document_id).execute()

    def read_document(self, document_id: str) -> Letter:
        """Read a document back as plain text.

        A document without a body reads as empty content.

        Args:
            document_id: The document ID.

        Returns:
            The letter with its title and flattened text.
        """
        doc = self.get_doc_structure(document_id)
        body = doc.get('body') or {}

        return Letter(
            id=doc.get('documentId', document_id),
            title=doc.get('title', ''),
            content=extract_text_from_element(body.get('content')),
        )

"""Data types passed between the Google adapters and the HTTP layer."""
from dataclasses import dataclass
from typing import Any, Optional

from .utils.constants import DOCUMENT_URL_TEMPLATE


@dataclass(frozen=True)
class FolderReference:
    """A Drive folder located by name."""

    id: str
    name: str


@dataclass(frozen=True)
class LetterSummary:
    """Metadata for one letter in the storage folder."""

    id: str
    name: str
    web_view_link: Optional[str] = None
    created_time: Optional[str] = None

    @classmethod
    def from_drive_file(cls, item: dict[str, Any]) -> "LetterSummary":
        return cls(
            id=item['id'],
            name=item.get('name', ''),
            web_view_link=item.get('webViewLink'),
            created_time=item.get('createdTime'),
        )


@dataclass(frozen=True)
class Letter:
    """A letter read back as plain text."""

    id: str
    title: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {'id': self.id, 'title': self.title, 'content': self.content}


@dataclass(frozen=True)
class CreatedLetter:
    """Result of a successful create-letter flow."""

    document_id: str
    folder_id: str

    @property
    def document_url(self) -> str:
        return DOCUMENT_URL_TEMPLATE.format(document_id=self.document_id)


@dataclass(frozen=True)
class TokenPair:
    """Tokens returned by the OAuth code exchange. Never stored."""

    access_token: str
    refresh_token: Optional[str] = None

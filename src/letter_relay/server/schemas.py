"""Request and response bodies for the HTTP API."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import CreatedLetter, LetterSummary


class CamelModel(BaseModel):
    """Fields are filled by name and rendered by their camelCase alias."""

    model_config = ConfigDict(populate_by_name=True)


class CreateLetterRequest(CamelModel):
    """Body of POST /api/letters. Presence is checked by the route."""

    content: Optional[str] = None
    title: Optional[str] = None
    access_token: Optional[str] = Field(default=None, alias="accessToken")

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or empty."""
        fields = {
            "content": self.content,
            "title": self.title,
            "accessToken": self.access_token,
        }
        return [name for name, value in fields.items() if not value]


class CreateLetterResponse(CamelModel):
    message: str
    document_id: str = Field(alias="documentId")
    document_url: str = Field(alias="documentUrl")

    @classmethod
    def from_created(cls, created: CreatedLetter, message: str) -> "CreateLetterResponse":
        return cls(
            message=message,
            document_id=created.document_id,
            document_url=created.document_url,
        )


class LetterSummaryOut(CamelModel):
    id: str
    name: str
    web_view_link: Optional[str] = Field(default=None, alias="webViewLink")
    created_time: Optional[str] = Field(default=None, alias="createdTime")

    @classmethod
    def from_summary(cls, summary: LetterSummary) -> "LetterSummaryOut":
        return cls(
            id=summary.id,
            name=summary.name,
            web_view_link=summary.web_view_link,
            created_time=summary.created_time,
        )


class LetterListResponse(BaseModel):
    letters: List[LetterSummaryOut]


class LetterResponse(BaseModel):
    id: str
    title: str
    content: str


class AuthUrlResponse(BaseModel):
    url: str


class ErrorResponse(BaseModel):
    error: str

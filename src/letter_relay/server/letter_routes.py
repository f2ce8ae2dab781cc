"""Letter routes: create, list and read letters in Google Drive.

Each handler validates its input before touching Google, authorizes a
client from the caller's token, runs the matching flow and maps a failed
step to a generic 500. Failure detail goes to the log only.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from .dependencies import Authorizer, get_authorizer
from .schemas import (
    CreateLetterRequest,
    CreateLetterResponse,
    ErrorResponse,
    LetterListResponse,
    LetterResponse,
    LetterSummaryOut,
)
from .. import letters
from ..core.pipeline import StepResult, run_step
from ..utils.constants import (
    MSG_LETTER_SAVED,
    MSG_LIST_FAILED,
    MSG_READ_FAILED,
    MSG_SAVE_FAILED,
)
from ..utils.errors import MissingCredentialError, MissingFieldError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/letters", tags=["letters"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _require_token(access_token: Optional[str]) -> str:
    if not access_token:
        raise MissingCredentialError()
    return access_token


def _failure(result: StepResult, action: str, message: str) -> JSONResponse:
    # The step already logged the error detail
    logger.warning(f"{action} answered 500 after step '{result.step}' failed")
    return JSONResponse(status_code=500, content={"error": message})


@router.post(
    "",
    response_model=CreateLetterResponse,
    status_code=201,
    responses=ERROR_RESPONSES,
)
async def create_letter(
    payload: CreateLetterRequest,
    authorizer: Authorizer = Depends(get_authorizer),
):
    """Save a letter as a Google Doc in the Letters folder."""
    missing = payload.missing_fields()
    if missing:
        raise MissingFieldError(missing)

    client = await run_step("Authorize", authorizer, payload.access_token)
    if not client.ok:
        return _failure(client, "Save letter", MSG_SAVE_FAILED)

    result = await letters.create_letter(client.value, payload.title, payload.content)
    if not result.ok:
        return _failure(result, "Save letter", MSG_SAVE_FAILED)

    logger.info(f"Saved letter {result.value.document_id}")
    return CreateLetterResponse.from_created(result.value, MSG_LETTER_SAVED)


@router.get(
    "",
    response_model=LetterListResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def list_letters(
    access_token: Optional[str] = Query(default=None, alias="accessToken"),
    authorizer: Authorizer = Depends(get_authorizer),
):
    """List the letters saved in the Letters folder."""
    token = _require_token(access_token)

    client = await run_step("Authorize", authorizer, token)
    if not client.ok:
        return _failure(client, "List letters", MSG_LIST_FAILED)

    result = await letters.list_letters(client.value)
    if not result.ok:
        return _failure(result, "List letters", MSG_LIST_FAILED)

    return LetterListResponse(
        letters=[LetterSummaryOut.from_summary(summary) for summary in result.value]
    )


@router.get("/{document_id}", response_model=LetterResponse, responses=ERROR_RESPONSES)
async def read_letter(
    document_id: str,
    access_token: Optional[str] = Query(default=None, alias="accessToken"),
    authorizer: Authorizer = Depends(get_authorizer),
):
    """Read a letter back as plain text for editing."""
    token = _require_token(access_token)

    client = await run_step("Authorize", authorizer, token)
    if not client.ok:
        return _failure(client, "Read letter", MSG_READ_FAILED)

    result = await letters.read_letter(client.value, document_id)
    if not result.ok:
        return _failure(result, "Read letter", MSG_READ_FAILED)

    return LetterResponse(**result.value.to_dict())

"""Google OAuth routes."""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, RedirectResponse

from .dependencies import get_config
from .schemas import AuthUrlResponse, ErrorResponse
from ..auth import build_authorization_url, build_client_redirect, exchange_code
from ..core.config import RelayConfig
from ..utils.constants import MSG_AUTH_FAILED

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth/google", tags=["auth"])


@router.get("/url", response_model=AuthUrlResponse)
def get_auth_url(config: RelayConfig = Depends(get_config)) -> AuthUrlResponse:
    """
    Build the Google consent URL.

    Requests profile, email and drive.file scopes with offline access and a
    forced consent screen.
    """
    return AuthUrlResponse(url=build_authorization_url(config))


@router.get(
    "/callback",
    response_class=RedirectResponse,
    status_code=302,
    responses={500: {"model": ErrorResponse}},
)
async def oauth_callback(
    code: Optional[str] = None,
    config: RelayConfig = Depends(get_config),
):
    """
    Handle the OAuth callback from Google.

    Exchanges the code for tokens and redirects the browser to the client
    application with access_token and refresh_token in the query string.
    """
    try:
        tokens = await asyncio.to_thread(exchange_code, config, code or "")
    except Exception as e:
        logger.error(f"Error exchanging code for tokens: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": MSG_AUTH_FAILED})

    return RedirectResponse(url=build_client_redirect(config, tokens), status_code=302)

"""FastAPI application factory for the letter relay."""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import auth_routes, letter_routes
from .middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from ..core.config import RelayConfig
from ..utils.constants import MSG_AUTH_FAILED, MSG_MISSING_FIELDS
from ..utils.errors import (
    MissingCredentialError,
    MissingFieldError,
    OAuthConfigurationError,
)

logger = logging.getLogger(__name__)


async def _missing_fields_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": MSG_MISSING_FIELDS})


async def _missing_credential_handler(request: Request, exc: MissingCredentialError) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: no access token")
    return JSONResponse(status_code=400, content={"error": exc.message})


async def _oauth_configuration_handler(request: Request, exc: OAuthConfigurationError) -> JSONResponse:
    logger.error(f"OAuth is not configured: {exc.message}")
    return JSONResponse(status_code=500, content={"error": MSG_AUTH_FAILED})


def create_app(config: Optional[RelayConfig] = None) -> FastAPI:
    """
    Build the relay application.

    Args:
        config: Relay configuration; read from the environment if omitted.

    Returns:
        The configured FastAPI app.
    """
    if config is None:
        config = RelayConfig.from_env()

    # Google adds openid to the granted scopes on code exchange
    os.environ.setdefault("OAUTHLIB_RELAX_TOKEN_SCOPE", "1")

    app = FastAPI(title="Letter Relay")
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.client_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, _missing_fields_handler)
    app.add_exception_handler(MissingFieldError, _missing_fields_handler)
    app.add_exception_handler(MissingCredentialError, _missing_credential_handler)
    app.add_exception_handler(OAuthConfigurationError, _oauth_configuration_handler)

    app.include_router(auth_routes.router)
    app.include_router(letter_routes.router)

    if not config.is_oauth_configured():
        logger.warning("GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET not set; OAuth routes will fail")

    return app

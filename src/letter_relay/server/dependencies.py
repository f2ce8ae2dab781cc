"""FastAPI dependencies shared by the route modules."""
from typing import Callable

from fastapi import Request

from ..client import LettersClient, authorize
from ..core.config import RelayConfig

Authorizer = Callable[[str], LettersClient]


def get_config(request: Request) -> RelayConfig:
    """Return the configuration the app was created with."""
    return request.app.state.config


def get_authorizer() -> Authorizer:
    """Return the function that turns a bearer token into a client."""
    return authorize

"""HTTP middleware: security headers and access logging."""
import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("letter_relay.access")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add security headers to all responses.

    Headers added:
    - X-Frame-Options: Prevent clickjacking
    - X-Content-Type-Options: Prevent MIME sniffing
    - X-DNS-Prefetch-Control: Disable DNS prefetching
    - Referrer-Policy: Keep token-bearing URLs out of Referer headers
    - Strict-Transport-Security: Force HTTPS
    - Cache-Control: no-store on the letter and auth routes
    """

    def __init__(
        self,
        app,
        hsts_max_age: int = 15552000,
        frame_options: str = "SAMEORIGIN",
        referrer_policy: str = "no-referrer",
    ):
        super().__init__(app)
        self.hsts_max_age = hsts_max_age
        self.frame_options = frame_options
        self.referrer_policy = referrer_policy

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Add security headers to response."""
        response = await call_next(request)

        response.headers["X-Frame-Options"] = self.frame_options
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-DNS-Prefetch-Control"] = "off"
        response.headers["Referrer-Policy"] = self.referrer_policy
        response.headers["Strict-Transport-Security"] = (
            f"max-age={self.hsts_max_age}; includeSubDomains"
        )

        # Responses carry tokens and letter text
        if request.url.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store"

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request with status and timing.

    Only the path is logged; query strings carry access tokens.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f} ms"
        )
        return response

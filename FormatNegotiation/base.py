"""
Base middleware for FormatNegotiation.

Provides path exclusion and client address lookup shared by middlewares.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class FormatNegotiationMiddlewareBase(BaseHTTPMiddleware):
    """
    Base class for FormatNegotiation middlewares.

    Attributes:
        exclude_paths: Path prefixes the middleware does not touch.
    """

    def __init__(self, app, exclude_paths: set[str] | None = None) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or set()

    def should_skip(self, request: Request) -> bool:
        """Check if the request path is excluded."""
        path = request.url.path
        return any(path.startswith(excluded) for excluded in self.exclude_paths)

    def get_client_ip(self, request: Request) -> str:
        """Get client IP, honouring X-Forwarded-For."""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()

        client = request.scope.get("client")
        return client[0] if client else "unknown"

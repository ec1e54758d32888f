"""
Format Negotiation Middleware for FormatNegotiation.

Resolves the response media types for each request from the ``f`` query
parameter and the Accept header.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from contextvars import ContextVar
from dataclasses import dataclass, replace

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from FormatNegotiation.base import FormatNegotiationMiddlewareBase
from FormatNegotiation.exceptions import NegotiationError
from FormatNegotiation.media_type import APPLICATION_JSON, MediaType
from FormatNegotiation.resolution import Resolution
from FormatNegotiation.resolver import FormatResolver
from FormatNegotiation.strategies import NegotiationStrategy


_media_types_ctx: ContextVar[Resolution | None] = ContextVar("media_types", default=None)


def get_resolved_media_types() -> Resolution | None:
    """Get the resolved media types for the current request."""
    return _media_types_ctx.get()


@dataclass
class FormatNegotiationConfig:
    """
    Configuration for format negotiation middleware.

    Attributes:
        fallback_type: Media type appended after the client's preferences.
        add_vary_header: Add ``Vary: Accept`` to responses.
        logger_name: Logger name for rejected formats.
    """

    fallback_type: MediaType = APPLICATION_JSON
    add_vary_header: bool = True
    logger_name: str = "format_negotiation"


class FormatNegotiationMiddleware(FormatNegotiationMiddlewareBase):
    """
    Middleware that resolves response media types.

    Stores the resolution on ``request.state.media_types``. Invalid ``f``
    values are answered with a 400 error body.

    Example:
        ```python
        from FormatNegotiation import (
            FormatNegotiationMiddleware,
            get_resolved_media_types,
            select_media_type,
        )

        app.add_middleware(FormatNegotiationMiddleware)

        @app.get("/services")
        async def services():
            media_type = select_media_type(get_resolved_media_types(), renderable)
            ...
        ```
    """

    def __init__(
        self,
        app,
        config: FormatNegotiationConfig | None = None,
        fallback_type: MediaType | None = None,
        strategies: Sequence[NegotiationStrategy] | None = None,
        exclude_paths: set[str] | None = None,
    ) -> None:
        super().__init__(app, exclude_paths=exclude_paths)
        self.config = config or FormatNegotiationConfig()

        if fallback_type:
            self.config = replace(self.config, fallback_type=fallback_type)

        self.resolver = FormatResolver(strategies, fallback=self.config.fallback_type)
        self._logger = logging.getLogger(self.config.logger_name)

    def _error_response(self, request: Request, exc: NegotiationError) -> Response:
        self._logger.warning(
            "Format negotiation failed for %s %s from %s: %s %s",
            request.method,
            request.url.path,
            self.get_client_ip(request),
            exc.message,
            "; ".join(exc.details),
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if self.should_skip(request):
            return await call_next(request)

        try:
            resolution = self.resolver.resolve_media_types(request)
        except NegotiationError as exc:
            return self._error_response(request, exc)

        self._logger.debug("Resolved %s %s to %r", request.method, request.url.path, resolution)

        token = _media_types_ctx.set(resolution)
        request.state.media_types = resolution

        try:
            response = await call_next(request)

            if self.config.add_vary_header:
                response.headers["Vary"] = "Accept"

            return response
        finally:
            _media_types_ctx.reset(token)

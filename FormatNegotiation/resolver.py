"""
Format resolver.

Runs the negotiation strategies in order and guarantees a fallback media
type whenever the client expressed a preference.
"""

from collections.abc import Sequence

from starlette.requests import Request

from FormatNegotiation.media_type import APPLICATION_JSON, MediaType
from FormatNegotiation.resolution import MATCH_ALL, Candidates, Resolution
from FormatNegotiation.strategies import (
    AcceptHeaderStrategy,
    FormatParameterStrategy,
    NegotiationStrategy,
)


def default_strategies() -> list[NegotiationStrategy]:
    """``f`` parameter first, then the Accept header."""
    return [FormatParameterStrategy(), AcceptHeaderStrategy()]


class FormatResolver:
    """
    Ordered chain of negotiation strategies.

    The first strategy that returns ``Candidates`` wins. Errors raised by a
    strategy abort resolution and propagate to the caller.

    Example:
        ```python
        from FormatNegotiation import FormatResolver, MATCH_ALL

        resolver = FormatResolver()
        resolution = resolver.resolve_media_types(request)
        if resolution is MATCH_ALL:
            ...
        ```
    """

    def __init__(
        self,
        strategies: Sequence[NegotiationStrategy] | None = None,
        fallback: MediaType = APPLICATION_JSON,
    ) -> None:
        self.strategies = tuple(strategies) if strategies is not None else tuple(default_strategies())
        self.fallback = fallback

    def _run_strategies(self, request: Request) -> Resolution:
        for strategy in self.strategies:
            result = strategy.resolve(request)
            if isinstance(result, Candidates):
                return result
        return MATCH_ALL

    def resolve_media_types(self, request: Request) -> Resolution:
        """
        Resolve the media types to offer for ``request``.

        ``MATCH_ALL`` is returned unchanged. Otherwise the fallback type is
        appended, unless the candidates already end with it.

        Raises:
            NegotiationError: If a strategy rejects the request.
        """
        result = self._run_strategies(request)
        if result is MATCH_ALL:
            return result

        if result[-1] == self.fallback:
            return result
        return result.appended(self.fallback)

"""
FormatNegotiation - response format resolution for GeoServer REST style APIs.

Resolves response media types from the ``f`` query parameter, falling back
to the Accept header and finally to JSON.
"""

from FormatNegotiation.base import FormatNegotiationMiddlewareBase
from FormatNegotiation.exceptions import (
    InvalidMediaTypeError,
    NegotiationError,
    UnsupportedFormatError,
)
from FormatNegotiation.format_negotiation import (
    FormatNegotiationConfig,
    FormatNegotiationMiddleware,
    get_resolved_media_types,
)
from FormatNegotiation.media_type import (
    ALL,
    APPLICATION_GEO_JSON,
    APPLICATION_JSON,
    APPLICATION_KMZ,
    APPLICATION_XML,
    IMAGE_PNG,
    TEXT_HTML,
    TEXT_XML,
    MediaType,
)
from FormatNegotiation.resolution import (
    MATCH_ALL,
    Candidates,
    MatchAll,
    Resolution,
    select_media_type,
)
from FormatNegotiation.resolver import FormatResolver, default_strategies
from FormatNegotiation.strategies import (
    AcceptHeaderStrategy,
    FormatParameterStrategy,
    NegotiationStrategy,
)


__version__ = "0.1.0"

__all__ = [
    "ALL",
    "APPLICATION_GEO_JSON",
    "APPLICATION_JSON",
    "APPLICATION_KMZ",
    "APPLICATION_XML",
    "IMAGE_PNG",
    "MATCH_ALL",
    "TEXT_HTML",
    "TEXT_XML",
    "AcceptHeaderStrategy",
    "Candidates",
    "FormatNegotiationConfig",
    "FormatNegotiationMiddleware",
    "FormatNegotiationMiddlewareBase",
    "FormatParameterStrategy",
    "FormatResolver",
    "InvalidMediaTypeError",
    "MatchAll",
    "MediaType",
    "NegotiationError",
    "NegotiationStrategy",
    "Resolution",
    "UnsupportedFormatError",
    "default_strategies",
    "get_resolved_media_types",
    "select_media_type",
]

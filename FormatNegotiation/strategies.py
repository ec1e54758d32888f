"""
Negotiation strategies.

Each strategy inspects a request and either proposes candidate media types
or returns ``MATCH_ALL`` to defer to the next strategy.
"""

from abc import ABC, abstractmethod

from starlette.requests import Request

from FormatNegotiation.exceptions import InvalidMediaTypeError, UnsupportedFormatError
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
from FormatNegotiation.resolution import MATCH_ALL, Candidates, Resolution


def get_parameter(request: Request, name: str) -> str | None:
    """First value of a query parameter, ``None`` if absent."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


class NegotiationStrategy(ABC):
    """Resolve the media types a request asks for."""

    @abstractmethod
    def resolve(self, request: Request) -> Resolution:
        """
        Resolve candidate media types for ``request``.

        Raises:
            NegotiationError: If the request asks for something invalid.
        """


class FormatParameterStrategy(NegotiationStrategy):
    """
    Uses the ``f`` and ``format`` query parameters.

    Only the first value of a repeated parameter counts.

    Example:
        ``?f=json``, ``?f=xml``, ``?f=image&format=jpeg``
    """

    format_param = "f"
    image_format_param = "format"

    # f values checked in order, exact match
    formats: dict[str, tuple[MediaType, ...]] = {
        "json": (APPLICATION_JSON,),
        "pjson": (APPLICATION_JSON,),
        "geojson": (APPLICATION_GEO_JSON,),
        "kmz": (APPLICATION_KMZ,),
        "xml": (APPLICATION_XML, TEXT_XML),
        "html": (TEXT_HTML,),
    }

    def resolve(self, request: Request) -> Resolution:
        f = get_parameter(request, self.format_param)
        if f is None:
            return MATCH_ALL

        if f in self.formats:
            return Candidates(self.formats[f])

        if f == "image":
            return Candidates.of(self._image_type(request))

        raise UnsupportedFormatError(f)

    def _image_type(self, request: Request) -> MediaType:
        image_format = get_parameter(request, self.image_format_param)
        # defaults to PNG
        if image_format is None:
            return IMAGE_PNG
        return MediaType.parse("image/" + image_format)


def _quality(media_type: MediaType) -> float:
    q = media_type.get_parameter("q")
    if q is None:
        return 1.0
    try:
        return min(max(float(q), 0.0), 1.0)
    except ValueError:
        return 1.0


def _sort_key(media_type: MediaType) -> tuple[int, float, int]:
    # specificity first, then quality, then remaining parameters
    params = len(media_type.without_parameter("q").parameters)
    return media_type.specificity, _quality(media_type), params


class AcceptHeaderStrategy(NegotiationStrategy):
    """
    Standard Accept header negotiation.

    Returns types ordered by specificity and quality, or ``MATCH_ALL`` when
    the header is missing or is exactly ``*/*``. Unparseable entries are
    ignored, so this strategy never raises.
    """

    header_name = "Accept"

    def _parse_accept(self, accept: str) -> list[MediaType]:
        """Parse Accept header into sorted media ranges, ``q`` kept."""
        types = []
        for raw_part in accept.split(","):
            part = raw_part.strip()
            if not part:
                continue

            try:
                parsed = MediaType.parse(part)
            except InvalidMediaTypeError:
                continue

            if _quality(parsed) > 0.0:
                types.append(parsed)

        return sorted(types, key=_sort_key, reverse=True)

    def resolve(self, request: Request) -> Resolution:
        values = request.headers.getlist(self.header_name)
        accept = ",".join(values)
        if not accept.strip():
            return MATCH_ALL

        media_types = self._parse_accept(accept)
        if not media_types or media_types == [ALL]:
            return MATCH_ALL

        return Candidates(tuple(media_type.without_parameter("q") for media_type in media_types))

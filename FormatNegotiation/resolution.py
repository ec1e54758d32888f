"""
Resolution outcomes.

A strategy either has no opinion (``MATCH_ALL``) or proposes a non-empty,
preference-ordered list of media types (``Candidates``).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from FormatNegotiation.media_type import MediaType


class MatchAll:
    """Any media type is acceptable. Use the ``MATCH_ALL`` singleton."""

    _instance: "MatchAll | None" = None

    def __new__(cls) -> "MatchAll":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MATCH_ALL"


MATCH_ALL = MatchAll()


@dataclass(frozen=True)
class Candidates:
    """Preference-ordered media types, most preferred first."""

    media_types: tuple[MediaType, ...]

    def __post_init__(self) -> None:
        if not self.media_types:
            raise ValueError("Candidates requires at least one media type")

    @classmethod
    def of(cls, *media_types: MediaType) -> "Candidates":
        return cls(tuple(media_types))

    def appended(self, media_type: MediaType) -> "Candidates":
        return Candidates(self.media_types + (media_type,))

    def __iter__(self):
        return iter(self.media_types)

    def __len__(self) -> int:
        return len(self.media_types)

    def __getitem__(self, index: int) -> MediaType:
        return self.media_types[index]

    def as_strings(self) -> list[str]:
        return [str(media_type) for media_type in self.media_types]


Resolution = MatchAll | Candidates


def select_media_type(
    resolution: Resolution, available: Iterable[MediaType]
) -> MediaType | None:
    """
    Pick the first media type the server can render.

    For ``MATCH_ALL`` that is the first available type. For ``Candidates``
    candidates are tried in order against every available type.
    """
    available = list(available)

    if isinstance(resolution, MatchAll):
        return available[0] if available else None

    for candidate in resolution:
        for offered in available:
            if candidate.includes(offered):
                return offered

    return None

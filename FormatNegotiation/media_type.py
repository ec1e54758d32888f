"""
Media type value object.

Parses and renders ``type/subtype;name=value`` strings.
"""

import re
from dataclasses import dataclass

from FormatNegotiation.exceptions import InvalidMediaTypeError


WILDCARD = "*"

# RFC 7230 token characters
_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def _is_token(value: str) -> bool:
    return bool(_TOKEN.match(value))


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value.startswith('"') and value.endswith('"')


@dataclass(frozen=True)
class MediaType:
    """
    Immutable media type.

    Attributes:
        type: Primary type, e.g. ``application``.
        subtype: Subtype, e.g. ``json``.
        parameters: Ordered ``(name, value)`` pairs.
    """

    type: str
    subtype: str
    parameters: tuple[tuple[str, str], ...] = ()

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """
        Parse a media type string.

        Type, subtype and parameter names are lower-cased. Parameter values
        are kept as given.

        Raises:
            InvalidMediaTypeError: If the string is not a valid media type.
        """
        if not value or not value.strip():
            raise InvalidMediaTypeError(value, "media type must not be empty")

        parts = value.split(";")
        full_type = parts[0].strip()

        # some clients send a lone "*"
        if full_type == WILDCARD:
            full_type = "*/*"

        if "/" not in full_type:
            raise InvalidMediaTypeError(value, "does not contain '/'")

        type_, _, subtype = full_type.partition("/")
        if not type_:
            raise InvalidMediaTypeError(value, "does not contain a type before '/'")
        if not subtype:
            raise InvalidMediaTypeError(value, "does not contain a subtype after '/'")
        if not _is_token(type_):
            raise InvalidMediaTypeError(value, f"invalid type {type_!r}")
        if not _is_token(subtype):
            raise InvalidMediaTypeError(value, f"invalid subtype {subtype!r}")
        if type_ == WILDCARD and subtype != WILDCARD:
            raise InvalidMediaTypeError(value, "wildcard type is legal only in '*/*'")

        parameters = []
        for raw_param in parts[1:]:
            param = raw_param.strip()
            if not param:
                continue

            name, sep, param_value = param.partition("=")
            name = name.strip()
            param_value = param_value.strip()
            if not sep or not name:
                raise InvalidMediaTypeError(value, f"invalid parameter {param!r}")
            if not _is_token(name):
                raise InvalidMediaTypeError(value, f"invalid parameter name {name!r}")
            if not (_is_token(param_value) or _is_quoted(param_value)):
                raise InvalidMediaTypeError(value, f"invalid parameter value {param_value!r}")

            parameters.append((name.lower(), param_value))

        return cls(type_.lower(), subtype.lower(), tuple(parameters))

    @property
    def full_type(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def is_wildcard_type(self) -> bool:
        return self.type == WILDCARD

    @property
    def is_wildcard_subtype(self) -> bool:
        return self.subtype == WILDCARD

    @property
    def specificity(self) -> int:
        """2 for a concrete type, 1 for ``type/*``, 0 for ``*/*``."""
        if self.is_wildcard_type:
            return 0
        if self.is_wildcard_subtype:
            return 1
        return 2

    def get_parameter(self, name: str) -> str | None:
        name = name.lower()
        for key, value in self.parameters:
            if key == name:
                return value
        return None

    def without_parameter(self, name: str) -> "MediaType":
        name = name.lower()
        remaining = tuple((k, v) for k, v in self.parameters if k != name)
        return MediaType(self.type, self.subtype, remaining)

    def includes(self, other: "MediaType") -> bool:
        """Check if this (possibly wildcard) range covers ``other``."""
        if self.is_wildcard_type:
            return True
        if self.type != other.type:
            return False
        return self.is_wildcard_subtype or self.subtype == other.subtype

    def __str__(self) -> str:
        params = "".join(f";{key}={value}" for key, value in self.parameters)
        return f"{self.full_type}{params}"


ALL = MediaType("*", "*")
APPLICATION_JSON = MediaType("application", "json")
APPLICATION_GEO_JSON = MediaType("application", "geo+json")
APPLICATION_KMZ = MediaType("application", "vnd.google-earth.kmz")
APPLICATION_XML = MediaType("application", "xml")
TEXT_XML = MediaType("text", "xml")
TEXT_HTML = MediaType("text", "html")
IMAGE_PNG = MediaType("image", "png")

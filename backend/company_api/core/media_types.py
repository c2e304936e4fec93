"""Media Types — Accept header parsing for linked (HATEOAS) responses.

Invariants:
    - Missing/blank Accept header → MediaTypeBadRequestError
    - Every entry must be type/subtype (parameters after ';' are ignored)
    - Links are wanted iff some subtype, minus its +suffix, ends with "hateoas"
"""

from dataclasses import dataclass

from company_api.core.errors import MediaTypeBadRequestError


@dataclass(frozen=True)
class MediaType:
    type: str
    subtype: str
    suffix: str | None = None

    @property
    def wants_links(self) -> bool:
        return self.subtype.endswith("hateoas")


def parse_media_type(value: str) -> MediaType:
    essence = value.split(";", 1)[0].strip().lower()
    main, sep, subtype = essence.partition("/")
    if not sep or not main or not subtype or "/" in subtype:
        raise MediaTypeBadRequestError("Media type not present.")
    subtype, _, suffix = subtype.partition("+")
    return MediaType(main, subtype, suffix or None)


def parse_accept(accept: str | None) -> list[MediaType]:
    """Validate an Accept header and return its media types in order."""
    if accept is None or not accept.strip():
        raise MediaTypeBadRequestError("Accept header is missing.")
    return [
        parse_media_type(entry) for entry in accept.split(",") if entry.strip()
    ]


def wants_links(accept: str | None) -> bool:
    """True when the Accept header asks for a linked representation."""
    return any(m.wants_links for m in parse_accept(accept))

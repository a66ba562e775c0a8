"""
Errors raised while parsing a Link header.

Every error aborts the whole parse; no partial result is ever returned.
Each class carries a ``kind`` code so callers can branch on the failure
without matching on message text.
"""

__all__ = [
    "LinkHeaderError",
    "InternalParserError",
    "InvalidReferenceError",
    "MalformedParameterError",
    "MalformedQueryError",
    "MissingRelationError",
]


class LinkHeaderError(ValueError):
    """Base class for all Link header parsing failures."""

    kind = "link_header"

    def __init__(self, message: str, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text


class InternalParserError(LinkHeaderError):
    """The parser broke one of its own invariants (a bug, not bad input)."""

    kind = "internal"


class InvalidReferenceError(LinkHeaderError):
    """The reference between the angle brackets is not a parseable URI."""

    kind = "invalid_reference"


class MalformedParameterError(LinkHeaderError):
    """A link parameter has no ``=`` separator."""

    kind = "malformed_parameter"


class MalformedQueryError(LinkHeaderError):
    """A query pair of the reference has no ``=`` separator."""

    kind = "malformed_query"


class MissingRelationError(LinkHeaderError):
    """An entry has no ``rel`` parameter but one is required."""

    kind = "missing_relation"

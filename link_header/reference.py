"""
Reference resolvers: turn the text between a Link entry's angle brackets
into a structured URI.

Two interchangeable resolvers share the same two-method interface:

* :class:`RelativeReferenceResolver` accepts any RFC 3986 URI-reference,
  including path-only links such as ``/foo/bar``.
* :class:`AbsoluteUrlResolver` accepts absolute URLs only and returns the
  :class:`urllib3.util.Url` type used throughout ``requests``.

Which one the parser uses by default is fixed per process by
``config.REFERENCE_MODE``.
"""

import urllib.parse
from typing import Any, Protocol

from urllib3.exceptions import LocationParseError
from urllib3.util import Url, parse_url

from link_header.config import REFERENCE_MODE, REFERENCE_MODES
from link_header.errors import InvalidReferenceError
from link_header.rfc3986 import URI_RE, URI_REFERENCE_RE


class ReferenceResolver(Protocol):
    """Capability interface every resolver implements."""

    def parse_reference(self, text: str) -> Any:
        """Return the structured reference or raise InvalidReferenceError."""

    def query(self, reference: Any) -> str | None:
        """Return the raw query component of *reference*, if any."""


class RelativeReferenceResolver:
    """Resolve absolute URIs and relative references alike.

    No authority is assumed: ``/foo/bar`` parses to a reference with an
    empty netloc.  Text outside the RFC 3986 URI-reference grammar, such as
    ``{``, ``|`` or a broken ``%`` escape, is rejected.
    """

    mode = "relative"

    def parse_reference(self, text: str) -> urllib.parse.SplitResult:
        if not text:
            raise InvalidReferenceError("Empty reference", text)
        try:
            reference = urllib.parse.urlsplit(text)
            # Port validation is lazy in urlsplit; force it here.
            reference.port
        except ValueError as exc:
            raise InvalidReferenceError(
                f"Invalid reference {text!r}: {exc}", text
            ) from exc
        if not URI_REFERENCE_RE.fullmatch(text):
            raise InvalidReferenceError(
                f"Invalid reference {text!r}: not an RFC 3986 URI-reference", text
            )
        return reference

    def query(self, reference: urllib.parse.SplitResult) -> str | None:
        return reference.query or None

    def __repr__(self) -> str:
        return "RelativeReferenceResolver()"


class AbsoluteUrlResolver:
    """Resolve absolute URLs only, as ``requests`` does before a request.

    References without a scheme or a host are rejected.
    """

    mode = "absolute"

    def parse_reference(self, text: str) -> Url:
        if not text:
            raise InvalidReferenceError("Empty reference", text)
        # parse_url percent-encodes invalid characters instead of rejecting them.
        if not URI_RE.fullmatch(text):
            raise InvalidReferenceError(
                f"Invalid URL {text!r}: not an absolute RFC 3986 URI", text
            )
        try:
            url = parse_url(text)
        except LocationParseError as exc:
            raise InvalidReferenceError(
                f"Invalid URL {text!r}: {exc}", text
            ) from exc
        if not url.scheme:
            raise InvalidReferenceError(
                f"Invalid URL {text!r}: no scheme supplied", text
            )
        if not url.host:
            raise InvalidReferenceError(
                f"Invalid URL {text!r}: no host supplied", text
            )
        return url

    def query(self, reference: Url) -> str | None:
        return reference.query or None

    def __repr__(self) -> str:
        return "AbsoluteUrlResolver()"


_RESOLVERS = {
    RelativeReferenceResolver.mode: RelativeReferenceResolver,
    AbsoluteUrlResolver.mode: AbsoluteUrlResolver,
}


def resolver_for_mode(mode: str) -> ReferenceResolver:
    """Return a resolver instance for *mode* (``relative`` or ``absolute``)."""
    try:
        return _RESOLVERS[mode]()
    except KeyError:
        raise ValueError(
            f"Unknown reference mode {mode!r}; expected one of {REFERENCE_MODES}"
        ) from None


DEFAULT_RESOLVER = resolver_for_mode(REFERENCE_MODE)

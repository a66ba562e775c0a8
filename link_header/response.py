"""
Helpers for reading the Link header straight off an HTTP response.

Works with ``requests.Response`` and anything else exposing a ``headers``
mapping; header lookup is case-insensitive.
"""

from collections.abc import Mapping

from requests.structures import CaseInsensitiveDict

from link_header.config import LINK_HEADER
from link_header.models import LinkEntry
from link_header.parser import parse, parse_with_mandatory_rel
from link_header.reference import DEFAULT_RESOLVER, ReferenceResolver
from link_header.utils.log import log


def link_header_value(headers: Mapping[str, str]) -> str | None:
    """Return the raw Link header from *headers*, or None if absent."""
    if not isinstance(headers, CaseInsensitiveDict):
        headers = CaseInsensitiveDict(headers)
    return headers.get(LINK_HEADER)


def links_from_response(
    response,
    *,
    mandatory_rel: bool = False,
    resolver: ReferenceResolver = DEFAULT_RESOLVER,
) -> dict:
    """
    Parse the Link header of *response*.

    A response without a Link header yields an empty dict.  A present but
    malformed header raises the same errors as :func:`parse`.
    """
    value = link_header_value(response.headers)
    if value is None:
        log.debug("[LINK] No %s header on %s", LINK_HEADER,
                  getattr(response, "url", None) or "response")
        return {}
    if mandatory_rel:
        return parse_with_mandatory_rel(value, resolver=resolver)
    return parse(value, resolver=resolver)


def next_link(links: Mapping[str | None, LinkEntry]) -> str | None:
    """Return the ``next`` reference of a parse result, for pagination."""
    entry = links.get("next")
    return entry.raw_reference if entry is not None else None

"""
Header tokenisation: strip syntax noise, split into entries, split each
entry into its reference and ``key=value`` parameters.

Splitting is purely syntactic.  Quotes are removed before any split, so a
parameter value cannot carry a literal quote or comma.
"""

import functools
import re
from collections.abc import Iterator

from link_header.config import (
    ENTRY_SEPARATOR,
    FIELD_SEPARATOR,
    PAIR_SEPARATOR,
    STRIP_CHARS_RE,
)
from link_header.errors import InternalParserError, MalformedParameterError


@functools.lru_cache(maxsize=None)
def _strip_pattern() -> re.Pattern[str]:
    """Compile the syntax-stripping pattern once, on first use."""
    try:
        return re.compile(STRIP_CHARS_RE)
    except re.error as exc:
        raise InternalParserError(
            f"Cannot compile strip pattern {STRIP_CHARS_RE!r}: {exc}",
            STRIP_CHARS_RE,
        ) from exc


def strip_syntax(header_value: str) -> str:
    """Remove ``<``, ``>``, ``"`` and all whitespace from *header_value*."""
    return _strip_pattern().sub("", header_value)


def iter_entries(header_value: str) -> Iterator[str]:
    """Yield the entry substrings of *header_value* in header order."""
    yield from strip_syntax(header_value).split(ENTRY_SEPARATOR)


def split_pair(field: str) -> tuple[str, str] | None:
    """Split *field* on its first ``=``; None when there is no ``=``."""
    key, sep, value = field.partition(PAIR_SEPARATOR)
    if not sep:
        return None
    return key, value


def split_entry(entry: str) -> tuple[str, list[tuple[str, str]]]:
    """
    Split one entry into ``(reference_text, [(key, value), ...])``.

    The first ``;``-separated field is the reference; every later field must
    be ``key=value`` and keeps everything after the first ``=`` verbatim.
    """
    fields = entry.split(FIELD_SEPARATOR)
    if not fields:
        raise InternalParserError(f"Entry {entry!r} produced no fields", entry)

    reference_text, *raw_params = fields
    params: list[tuple[str, str]] = []
    for raw in raw_params:
        pair = split_pair(raw)
        if pair is None:
            raise MalformedParameterError(
                f"Link parameter {raw!r} has no '=' separator", raw
            )
        params.append(pair)
    return reference_text, params

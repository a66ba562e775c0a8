"""
Data model for parsed Link header entries.
"""

from dataclasses import dataclass, field
from typing import Any

from link_header.config import REL_PARAM

# Key used by parse() for entries without a ``rel`` parameter.  It is None,
# not "", so that ``rel=""`` stays a distinct key.
NO_RELATION = None


@dataclass(frozen=True)
class LinkEntry:
    """One ``<reference>; key=value; ...`` segment of a Link header.

    ``reference`` is whatever the configured resolver returned for
    ``raw_reference``; two entries compare equal when all four fields do.
    Entries hold dicts and are not hashable.
    """

    __hash__ = None  # type: ignore[assignment]

    reference: Any
    raw_reference: str
    query_parameters: dict[str, str] = field(default_factory=dict)
    link_parameters: dict[str, str] = field(default_factory=dict)

    @property
    def rel(self) -> str | None:
        """The ``rel`` parameter, or None when the entry has none."""
        return self.link_parameters.get(REL_PARAM)

    @property
    def url(self) -> str:
        """The reference text as it appeared in the header."""
        return self.raw_reference

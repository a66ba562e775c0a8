"""Link header parser: tokenisation, query decomposition, assembly."""

from link_header.parser.core import derive_key, parse, parse_entry, parse_with_mandatory_rel
from link_header.parser.query import split_query
from link_header.parser.tokenize import iter_entries, split_entry, strip_syntax

__all__ = [
    "parse",
    "parse_with_mandatory_rel",
    "parse_entry",
    "derive_key",
    "split_query",
    "iter_entries",
    "split_entry",
    "strip_syntax",
]

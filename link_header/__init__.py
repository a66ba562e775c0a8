"""
link_header
===========
Parse HTTP ``Link:`` header values (RFC 8288) into a mapping from relation
type to parsed link entry.

Package structure
-----------------
link_header/
├── __init__.py       – package init and public API
├── config.py         – syntax constants and the reference mode
├── errors.py         – error classes, one per failure kind
├── models.py         – LinkEntry and the NO_RELATION key
├── reference.py      – relative / absolute reference resolvers
├── rfc3986.py        – URI / URI-reference grammar regexes
├── response.py       – Link header lookup on HTTP responses
├── parser/           – sub-package: the parsing passes
│   ├── tokenize.py   – syntax stripping, entry and field splitting
│   ├── query.py      – query string decomposition
│   └── core.py       – parse() / parse_with_mandatory_rel()
└── utils/
    └── log.py        – package logger and setup_logging()

Quick start
-----------
    from link_header import parse

    links = parse('<https://api.github.com/repos?page=2>; rel="next", '
                  '<https://api.github.com/repos?page=14>; rel="last"')
    links["next"].query_parameters   # {"page": "2"}

Limitations
-----------
Quotes and whitespace are stripped and entries are split on every comma,
so parameter values cannot contain a literal quote or comma.  When several
entries share a relation, the last one wins.
"""

from .errors   import (
    LinkHeaderError,
    InternalParserError,
    InvalidReferenceError,
    MalformedParameterError,
    MalformedQueryError,
    MissingRelationError,
)
from .models   import LinkEntry, NO_RELATION
from .parser   import parse, parse_with_mandatory_rel
from .reference import (
    AbsoluteUrlResolver,
    DEFAULT_RESOLVER,
    ReferenceResolver,
    RelativeReferenceResolver,
    resolver_for_mode,
)
from .response import links_from_response, next_link
from .utils    import setup_logging

__version__ = "0.1.0"

__all__ = [
    "parse",
    "parse_with_mandatory_rel",
    "links_from_response",
    "next_link",
    "LinkEntry",
    "NO_RELATION",
    "LinkHeaderError",
    "InternalParserError",
    "InvalidReferenceError",
    "MalformedParameterError",
    "MalformedQueryError",
    "MissingRelationError",
    "ReferenceResolver",
    "RelativeReferenceResolver",
    "AbsoluteUrlResolver",
    "DEFAULT_RESOLVER",
    "resolver_for_mode",
    "setup_logging",
]

"""
Query decomposition for a resolved reference.
"""

from link_header.config import QUERY_SEPARATOR
from link_header.errors import MalformedQueryError
from link_header.parser.tokenize import split_pair


def split_query(query: str | None) -> dict[str, str]:
    """
    Split *query* into a ``{key: value}`` dict.

    Some servers emit ``?&key=value``; a single leading ``&`` is dropped
    rather than read as a key-less pair.  Any other segment without ``=``
    raises MalformedQueryError.  Repeated keys keep their last value.
    """
    if not query:
        return {}

    if query.startswith(QUERY_SEPARATOR):
        query = query[len(QUERY_SEPARATOR):]
        if not query:
            return {}

    params: dict[str, str] = {}
    for segment in query.split(QUERY_SEPARATOR):
        pair = split_pair(segment)
        if pair is None:
            raise MalformedQueryError(
                f"Query segment {segment!r} has no '=' separator", segment
            )
        key, value = pair
        params[key] = value
    return params

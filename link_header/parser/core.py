"""
Link header parsing entry points.

Each entry goes through the same stages independently: split into
reference and parameters, resolve the reference, decompose its query,
derive the relation key.  The first error raised by any stage aborts the
whole call.
"""

from link_header.config import REL_PARAM
from link_header.errors import LinkHeaderError, MissingRelationError
from link_header.models import NO_RELATION, LinkEntry
from link_header.parser.query import split_query
from link_header.parser.tokenize import iter_entries, split_entry
from link_header.reference import DEFAULT_RESOLVER, ReferenceResolver
from link_header.utils.log import log


def parse_entry(entry: str, resolver: ReferenceResolver = DEFAULT_RESOLVER) -> LinkEntry:
    """Build a LinkEntry from one preprocessed entry substring."""
    raw_reference, params = split_entry(entry)
    reference = resolver.parse_reference(raw_reference)
    query_parameters = split_query(resolver.query(reference))
    return LinkEntry(
        reference=reference,
        raw_reference=raw_reference,
        query_parameters=query_parameters,
        link_parameters=dict(params),
    )


def derive_key(entry: LinkEntry, mandatory_rel: bool = False) -> str | None:
    """
    Return the result key for *entry*.

    With *mandatory_rel* an entry lacking ``rel`` raises
    MissingRelationError; otherwise it maps to NO_RELATION.
    """
    rel = entry.link_parameters.get(REL_PARAM)
    if rel is not None:
        return rel
    if mandatory_rel:
        raise MissingRelationError(
            f"Link to {entry.raw_reference!r} has no {REL_PARAM!r} parameter",
            entry.raw_reference,
        )
    return NO_RELATION


def _parse(
    header_value: str,
    resolver: ReferenceResolver,
    mandatory_rel: bool,
) -> dict:
    result: dict = {}
    try:
        for text in iter_entries(header_value):
            entry = parse_entry(text, resolver)
            key = derive_key(entry, mandatory_rel)
            if key in result:
                log.debug("[LINK] Relation %r repeated; keeping %s",
                          key, entry.raw_reference)
            result[key] = entry
    except LinkHeaderError as exc:
        log.debug("[LINK] Parse failed (%s): %s", exc.kind, exc)
        raise
    log.debug("[LINK] Parsed %d relation(s): %s", len(result), list(result))
    return result


def parse(
    header_value: str,
    *,
    resolver: ReferenceResolver = DEFAULT_RESOLVER,
) -> dict[str | None, LinkEntry]:
    """
    Parse a Link header value into ``{rel: LinkEntry}``.

    Entries without ``rel`` are stored under NO_RELATION (None).  When two
    entries share a relation the later one wins.  An empty header value is
    not an empty result: it fails with InvalidReferenceError.
    """
    return _parse(header_value, resolver, mandatory_rel=False)


def parse_with_mandatory_rel(
    header_value: str,
    *,
    resolver: ReferenceResolver = DEFAULT_RESOLVER,
) -> dict[str, LinkEntry]:
    """Like :func:`parse`, but every entry must carry a ``rel`` parameter."""
    return _parse(header_value, resolver, mandatory_rel=True)

"""
Configuration constants for the Link header parser.
"""

import os

# ---------------------------------------------------------------------------
# Header syntax
# ---------------------------------------------------------------------------
# Characters with no meaning once the header is tokenised: the angle brackets
# around the reference, quotes around parameter values and all whitespace.
STRIP_CHARS_RE = r'[<>"\s]'

ENTRY_SEPARATOR = ","
FIELD_SEPARATOR = ";"
PAIR_SEPARATOR  = "="
QUERY_SEPARATOR = "&"

REL_PARAM   = "rel"
LINK_HEADER = "Link"

# ---------------------------------------------------------------------------
# Reference resolution
# ---------------------------------------------------------------------------
# "relative" accepts any URI-reference (absolute or path-only),
# "absolute" accepts absolute URLs only.
REFERENCE_MODES = ("relative", "absolute")
DEFAULT_REFERENCE_MODE = "relative"

# Chosen once per process; set LINK_HEADER_REFERENCE_MODE at deployment time.
REFERENCE_MODE = (
    os.environ.get("LINK_HEADER_REFERENCE_MODE", DEFAULT_REFERENCE_MODE)
    .strip()
    .lower()
)

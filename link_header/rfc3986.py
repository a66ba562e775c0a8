"""
Regex for RFC3986

These regex are directly derived from the collected ABNF in RFC3986.

  <https://tools.ietf.org/html/rfc3986#appendix-A>

They should be processed with re.VERBOSE.  The compiled forms at the end of
the module are built once and matched with ``fullmatch``.
"""

# pylint: disable=invalid-name

import re

ALPHA = r"[A-Za-z]"
DIGIT = r"[0-9]"
HEXDIG = r"[0-9A-Fa-f]"

#  pct-encoded   = "%" HEXDIG HEXDIG

pct_encoded = rf"(?: % {HEXDIG} {HEXDIG} )"

#  unreserved    = ALPHA / DIGIT / "-" / "." / "_" / "~"

unreserved = r"[A-Za-z0-9\-._~]"

#  sub-delims    = "!" / "$" / "&" / "'" / "(" / ")"
#                / "*" / "+" / "," / ";" / "="

sub_delims = r"[!$&'()*+,;=]"

#  pchar         = unreserved / pct-encoded / sub-delims / ":" / "@"

pchar = rf"(?: {unreserved} | {pct_encoded} | {sub_delims} | [:@] )"

#  segment       = *pchar
#  segment-nz    = 1*pchar
#  segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )

segment = rf"(?: {pchar}* )"
segment_nz = rf"(?: {pchar}+ )"
segment_nz_nc = rf"(?: (?: {unreserved} | {pct_encoded} | {sub_delims} | @ )+ )"

#  path-abempty  = *( "/" segment )
#  path-absolute = "/" [ segment-nz *( "/" segment ) ]
#  path-noscheme = segment-nz-nc *( "/" segment )
#  path-rootless = segment-nz *( "/" segment )
#  path-empty    = 0<pchar>

path_abempty = rf"(?: (?: / {segment} )* )"
path_absolute = rf"(?: / (?: {segment_nz} (?: / {segment} )* )? )"
path_noscheme = rf"(?: {segment_nz_nc} (?: / {segment} )* )"
path_rootless = rf"(?: {segment_nz} (?: / {segment} )* )"
path_empty = r"(?: )"

#  scheme        = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )

scheme = rf"(?: {ALPHA} [A-Za-z0-9+\-.]* )"

#  userinfo      = *( unreserved / pct-encoded / sub-delims / ":" )

userinfo = rf"(?: (?: {unreserved} | {pct_encoded} | {sub_delims} | : )* )"

#  dec-octet     = DIGIT / %x31-39 DIGIT / "1" 2DIGIT
#                / "2" %x30-34 DIGIT / "25" %x30-35
#  IPv4address   = dec-octet "." dec-octet "." dec-octet "." dec-octet

dec_octet = r"(?: 25[0-5] | 2[0-4][0-9] | 1[0-9][0-9] | [1-9][0-9] | [0-9] )"
IPv4address = rf"(?: {dec_octet} \. {dec_octet} \. {dec_octet} \. {dec_octet} )"

#  h16           = 1*4HEXDIG
#  ls32          = ( h16 ":" h16 ) / IPv4address

h16 = rf"(?: {HEXDIG}{{1,4}} )"
ls32 = rf"(?: (?: {h16} : {h16} ) | {IPv4address} )"

#  IPv6address   =                            6( h16 ":" ) ls32
#                /                       "::" 5( h16 ":" ) ls32
#                / [               h16 ] "::" 4( h16 ":" ) ls32
#                / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#                / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#                / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#                / [ *4( h16 ":" ) h16 ] "::"              ls32
#                / [ *5( h16 ":" ) h16 ] "::"              h16
#                / [ *6( h16 ":" ) h16 ] "::"

IPv6address = rf"""(?:
                                                  (?: {h16} : ){{6}} {ls32}
  |                                            :: (?: {h16} : ){{5}} {ls32}
  | (?:                              {h16} )?  :: (?: {h16} : ){{4}} {ls32}
  | (?: (?: {h16} : ){{0,1}}         {h16} )?  :: (?: {h16} : ){{3}} {ls32}
  | (?: (?: {h16} : ){{0,2}}         {h16} )?  :: (?: {h16} : ){{2}} {ls32}
  | (?: (?: {h16} : ){{0,3}}         {h16} )?  :: {h16} :            {ls32}
  | (?: (?: {h16} : ){{0,4}}         {h16} )?  ::                    {ls32}
  | (?: (?: {h16} : ){{0,5}}         {h16} )?  ::                    {h16}
  | (?: (?: {h16} : ){{0,6}}         {h16} )?  ::
)"""

#  IPvFuture     = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
#  IP-literal    = "[" ( IPv6address / IPvFuture  ) "]"

IPvFuture = rf"(?: v {HEXDIG}+ \. (?: {unreserved} | {sub_delims} | : )+ )"
IP_literal = rf"(?: \[ (?: {IPv6address} | {IPvFuture} ) \] )"

#  reg-name      = *( unreserved / pct-encoded / sub-delims )
#  host          = IP-literal / IPv4address / reg-name
#  port          = *DIGIT
#  authority     = [ userinfo "@" ] host [ ":" port ]

reg_name = rf"(?: (?: {unreserved} | {pct_encoded} | {sub_delims} )* )"
host = rf"(?: {IP_literal} | {IPv4address} | {reg_name} )"
port = rf"(?: {DIGIT}* )"
authority = rf"(?: (?: {userinfo} @ )? {host} (?: : {port} )? )"

#  query         = *( pchar / "/" / "?" )
#  fragment      = *( pchar / "/" / "?" )

query = rf"(?: (?: {pchar} | [/?] )* )"
fragment = rf"(?: (?: {pchar} | [/?] )* )"

#  hier-part     = "//" authority path-abempty
#                / path-absolute
#                / path-rootless
#                / path-empty

hier_part = rf"""(?: (?: // {authority} {path_abempty} )
                  | {path_absolute}
                  | {path_rootless}
                  | {path_empty}
)"""

#  URI           = scheme ":" hier-part [ "?" query ] [ "#" fragment ]

URI = rf"(?: {scheme} : {hier_part} (?: [?] {query} )? (?: [#] {fragment} )? )"

#  relative-part = "//" authority path-abempty
#                / path-absolute
#                / path-noscheme
#                / path-empty
#  relative-ref  = relative-part [ "?" query ] [ "#" fragment ]

relative_part = rf"""(?: (?: // {authority} {path_abempty} )
                      | {path_absolute}
                      | {path_noscheme}
                      | {path_empty}
)"""
relative_ref = rf"(?: {relative_part} (?: [?] {query} )? (?: [#] {fragment} )? )"

#  URI-reference = URI / relative-ref

URI_reference = rf"(?: {URI} | {relative_ref} )"

URI_RE = re.compile(URI, re.VERBOSE)
URI_REFERENCE_RE = re.compile(URI_reference, re.VERBOSE)

"""Generic URI grammar (RFC 3986, Appendix B)."""

import re

# Groups: 2 = scheme, 4 = authority, 5 = path, 7 = query, 9 = fragment.
URI_PATTERN = re.compile(r"^(([^:/?#]+?):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?")

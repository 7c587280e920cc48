from typing import Mapping, Optional
from urllib.parse import urlencode, urlunsplit


def build_url(
    scheme: str, host: str, path: str, query: Optional[Mapping[str, str]] = None
) -> str:
    """
    Compose an absolute URL from the proxy base and a call path.
    The path is used verbatim (no templating, no slash normalization).
    Query keys are sorted, values percent-encoded; empty query -> no '?'.
    """
    raw_query = urlencode(sorted(query.items())) if query else ""
    return urlunsplit((scheme, host, path, raw_query, ""))

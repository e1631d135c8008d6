"""
Where: webdata/normalizer/core/url.py
What: Request target decomposition into path segments and query parameters.
Why: Path and query are parsed once so application code never re-splits the target.
"""

from typing import Dict, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote, quote_plus, unquote_plus

from ..models.query import QueryValue


def decode_target(raw_target: str) -> str:
    """Percent-decode a raw request target once ('+' becomes a space)."""
    return unquote_plus(raw_target)


def split_target(target: str) -> Tuple[Tuple[str, ...], Optional[str]]:
    """
    Split a decoded target into path segments and the query remainder.

    Exactly one leading slash is stripped. A trailing empty (or whitespace-only)
    segment produced by a final slash is dropped, empty segments elsewhere are
    kept: ``a//b`` -> ``("a", "", "b")``.

    Returns:
        (segments, query_string) where query_string is None without a '?'.
    """
    if target.startswith("/"):
        target = target[1:]

    path_part, sep, query_part = target.partition("?")

    segments = path_part.split("/")
    if not segments[-1].strip():
        segments.pop()

    return tuple(segments), (query_part if sep else None)


def decode_query(query_string: Optional[str]) -> Dict[str, QueryValue]:
    """
    Decode a query string into a key -> value mapping.

    Pairs are written in reverse declaration order, so for a repeated key the
    first occurrence wins: ``k1=v1&k2&k1=v2`` -> ``{"k1": "v1", "k2": True}``.
    A pair without '=' is a presence-only flag (True). Keys are used verbatim,
    values are percent-decoded.
    """
    query: Dict[str, QueryValue] = {}
    if query_string is None:
        return query

    for raw_pair in reversed(query_string.split("&")):
        key, sep, value = raw_pair.partition("=")
        query[key] = unquote_plus(value) if sep else True
    return query


def build_target(path: Sequence[str], query: Mapping[str, QueryValue]) -> str:
    """
    Rebuild a target from decomposed parts.

    The query mapping is filled last-to-first, so it is walked in reverse to
    restore declaration order.
    """
    target = "/" + "/".join(quote(segment) for segment in path)
    if not query:
        return target

    pairs = []
    for key, value in reversed(list(query.items())):
        if value is True:
            pairs.append(key)
        else:
            pairs.append(f"{key}={quote_plus(value)}")
    return f"{target}?{'&'.join(pairs)}"

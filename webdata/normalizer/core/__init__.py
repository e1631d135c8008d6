"""
Core logic package.

Provides the request normalization steps and the normalizer that chains them.
"""

from .url import build_target, decode_query, decode_target, split_target
from .headers import canonical_header_name, extract_headers
from .body import ContentDecoder, decode_body, strip_content_type
from .endpoints import resolve_endpoints
from .normalizer import RequestNormalizer, parse_request

__all__ = [
    "build_target",
    "decode_query",
    "decode_target",
    "split_target",
    "canonical_header_name",
    "extract_headers",
    "ContentDecoder",
    "decode_body",
    "strip_content_type",
    "resolve_endpoints",
    "RequestNormalizer",
    "parse_request",
]

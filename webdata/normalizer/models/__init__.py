"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .content import ContentKind, DecodedContent
from .endpoint import UNKNOWN_PORT, Endpoints
from .query import QueryValue
from .request import ParsedRequest
from .transport import REQUIRED_ENVIRON_KEYS, TransportSnapshot

__all__ = [
    "ContentKind",
    "DecodedContent",
    "UNKNOWN_PORT",
    "Endpoints",
    "QueryValue",
    "ParsedRequest",
    "REQUIRED_ENVIRON_KEYS",
    "TransportSnapshot",
]

"""
Parsed request model.

The normalized, read-only view of one HTTP request.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .content import DecodedContent
from .query import QueryValue


class ParsedRequest(BaseModel):
    """
    Normalized HTTP request.

    Built once from a ``TransportSnapshot`` by ``RequestNormalizer`` and never
    mutated afterwards. The model is frozen and ``query`` / ``headers`` are
    read-only mappings.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    raw_uri: str
    scheme: str
    host: str
    path: Tuple[str, ...] = ()
    query: Mapping[str, QueryValue] = Field(default_factory=dict, validate_default=True)
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    remote_endpoint: str
    local_endpoint: str
    proxy_endpoint: Optional[str] = None
    content_type: Optional[str] = None
    content: DecodedContent = Field(default_factory=DecodedContent.absent)

    @field_validator("query", "headers")
    @classmethod
    def freeze_mapping(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("query", "headers")
    def dump_mapping(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(value)

    def is_method(self, method: str) -> bool:
        """Case-insensitive method comparison."""
        return self.method == method.lower()

    def get_header(self, name: str) -> Optional[str]:
        """
        Get a header value by any spelling of its name.

        Returns None when the header was not sent; an empty string means it
        was sent empty.
        """
        return self.headers.get(name.replace("_", "-").lower())

    def contains_header(self, name: str) -> bool:
        return self.get_header(name) is not None

    def get_query(self, key: str) -> Optional[QueryValue]:
        """
        Get a query parameter by exact key.

        Returns None when absent, True for a presence-only flag.
        """
        return self.query.get(key)

    def get_content_type(self) -> Optional[str]:
        """Content type without parameters, None if the request had none."""
        return self.content_type

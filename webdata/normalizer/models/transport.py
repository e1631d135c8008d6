"""
Transport snapshot model.

Everything the transport layer hands over for one request, captured once.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# CGI-style keys that must be present for a request to be normalized.
REQUIRED_ENVIRON_KEYS = (
    "REQUEST_METHOD",
    "REQUEST_SCHEME",
    "HTTP_HOST",
    "REQUEST_URI",
    "REMOTE_ADDR",
    "REMOTE_PORT",
    "SERVER_ADDR",
    "SERVER_PORT",
)

HEADER_PREFIX = "HTTP_"


class TransportSnapshot(BaseModel):
    """
    Immutable input of the normalizer.

    ``environ`` uses CGI naming (``REQUEST_METHOD``, ``HTTP_ACCEPT``, ...).
    ``body`` is the fully buffered request body. ``multipart_fields`` carries
    form fields when the transport layer already parsed a multipart body.
    ``content_override`` skips body decoding and is stored as content as-is.
    """

    model_config = ConfigDict(frozen=True)

    environ: Dict[str, Any]
    body: bytes = b""
    multipart_fields: Optional[Dict[str, Any]] = None
    content_override: Optional[Any] = None

    def missing_fields(self) -> list[str]:
        return [key for key in REQUIRED_ENVIRON_KEYS if key not in self.environ]

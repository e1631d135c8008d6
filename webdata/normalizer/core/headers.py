"""
Header extraction from a CGI-style transport environment.
"""

from typing import Any, Dict, Mapping

from ..models.transport import HEADER_PREFIX


def canonical_header_name(name: str) -> str:
    """``Accept_Encoding`` / ``ACCEPT-ENCODING`` -> ``accept-encoding``."""
    return name.replace("_", "-").lower()


def extract_headers(environ: Mapping[str, Any]) -> Dict[str, str]:
    """
    Collect all ``HTTP_*`` fields into a canonical header mapping.

    ``CONTENT_TYPE`` and ``CONTENT_LENGTH`` are not prefixed by the transport
    layer; they are merged in as ``content-type`` / ``content-length``
    (content-length only alongside a content type).
    """
    headers: Dict[str, str] = {}
    for key, value in environ.items():
        if key.startswith(HEADER_PREFIX):
            headers[canonical_header_name(key[len(HEADER_PREFIX) :])] = str(value)

    if "CONTENT_TYPE" in environ:
        headers["content-type"] = str(environ["CONTENT_TYPE"])
        if "CONTENT_LENGTH" in environ:
            headers["content-length"] = str(environ["CONTENT_LENGTH"])

    return headers

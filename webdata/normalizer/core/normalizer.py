"""
Where: webdata/normalizer/core/normalizer.py
What: Builds a ParsedRequest from a TransportSnapshot in one synchronous pass.
Why: Application code queries the structured value instead of re-parsing the environment.
"""

import copy
import logging
from typing import Any, Dict, Optional

from ..config import config
from ..exceptions import MissingTransportFieldError
from ..models.content import ContentKind, DecodedContent
from ..models.request import ParsedRequest
from ..models.transport import TransportSnapshot
from .body import build_decoder_table, decode_body, strip_content_type
from .endpoints import resolve_endpoints
from .headers import extract_headers
from .url import decode_query, decode_target, split_target

logger = logging.getLogger("normalizer.main")


class RequestNormalizer:
    """
    Request Normalizer.

    Steps, in order:
        1. URL decomposition (path segments + query remainder)
        2. Query decoding
        3. Header extraction
        4. Body decoding (needs headers and method)
        5. Endpoint resolution (needs headers)

    The instance holds only the decoder table and can be shared between threads.
    """

    def __init__(self, xml_enabled: Optional[bool] = None):
        if xml_enabled is None:
            xml_enabled = config.XML_DECODING_ENABLED
        self.decoders = build_decoder_table(xml_enabled=xml_enabled)

    def normalize(self, snapshot: TransportSnapshot) -> ParsedRequest:
        """
        Normalize one request.

        Raises:
            MissingTransportFieldError: mandatory environ keys are missing
        """
        missing = snapshot.missing_fields()
        if missing:
            raise MissingTransportFieldError(missing)

        environ = snapshot.environ
        method = str(environ["REQUEST_METHOD"]).lower()
        scheme = str(environ["REQUEST_SCHEME"]).lower()
        host = str(environ["HTTP_HOST"])
        target = decode_target(str(environ["REQUEST_URI"]))

        path, query_string = split_target(target)
        query = decode_query(query_string)
        headers = extract_headers(environ)

        content_type = None
        content = DecodedContent.absent()
        if "CONTENT_TYPE" in environ:
            content_type = strip_content_type(str(environ["CONTENT_TYPE"]))
            if snapshot.content_override is not None:
                content = DecodedContent(
                    kind=ContentKind.OVERRIDE, value=copy.deepcopy(snapshot.content_override)
                )
            else:
                content = decode_body(
                    str(environ["CONTENT_TYPE"]),
                    method,
                    snapshot.body,
                    snapshot.multipart_fields,
                    decoders=self.decoders,
                )

        endpoints = resolve_endpoints(environ, headers)

        request = ParsedRequest(
            method=method,
            raw_uri=f"{scheme}://{host}{target}",
            scheme=scheme,
            host=host,
            path=path,
            query=query,
            headers=headers,
            remote_endpoint=endpoints.remote,
            local_endpoint=endpoints.local,
            proxy_endpoint=endpoints.proxy,
            content_type=content_type,
            content=content,
        )

        logger.debug(
            f"Normalized {method} {target}",
            extra={
                "method": method,
                "path": "/".join(path),
                "content_kind": content.kind.value,
                "proxied": endpoints.is_proxied,
            },
        )
        return request


default_normalizer = RequestNormalizer()


def parse_request(
    environ: Dict[str, Any],
    body: bytes = b"",
    multipart_fields: Optional[Dict[str, Any]] = None,
    content_override: Optional[Any] = None,
) -> ParsedRequest:
    """
    Normalize a CGI-style environment and body with the default normalizer.
    """
    snapshot = TransportSnapshot(
        environ=environ,
        body=body,
        multipart_fields=multipart_fields,
        content_override=content_override,
    )
    return default_normalizer.normalize(snapshot)

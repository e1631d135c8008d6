import json
import logging
import xml.etree.ElementTree as ElementTree
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from urllib.parse import unquote_plus

from ..models.content import ContentKind, DecodedContent

logger = logging.getLogger("normalizer.body")


def strip_content_type(value: str) -> str:
    """
    Drop ``;`` parameters from a content type value.

    "application/json; charset=utf-8" -> "application/json"
    """
    return value.split(";", 1)[0].strip()


class ContentDecoder(ABC):
    """Decodes a buffered request body for one media type."""

    content_type: str = ""

    @abstractmethod
    def decode(
        self, body: bytes, method: str, multipart_fields: Optional[Dict[str, Any]] = None
    ) -> DecodedContent:
        """
        Decode the body. Failures are returned as an absent result with a
        warning, never raised.
        """
        pass


class JsonDecoder(ContentDecoder):
    content_type = "application/json"

    def decode(self, body, method, multipart_fields=None):
        try:
            return DecodedContent(kind=ContentKind.JSON, value=json.loads(body.decode("utf-8")))
        except (ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized integers.
            logger.warning(
                "Failed to parse request body as JSON",
                extra={"content_type": self.content_type, "error": str(e)},
            )
            return DecodedContent.absent(warning=f"Invalid JSON body: {e}")


class MultipartDecoder(ContentDecoder):
    """
    Multipart bodies are parsed by the transport layer; only the resulting
    field mapping is taken over, and only for POST.
    """

    content_type = "multipart/form-data"

    def decode(self, body, method, multipart_fields=None):
        if method != "post":
            logger.warning(
                f"Invalid Request-Method for MIME-Type: {self.content_type}",
                extra={"method": method},
            )
            return DecodedContent.absent(
                warning=f"{self.content_type} requires method post, got {method}"
            )
        return DecodedContent(kind=ContentKind.MULTIPART_FIELDS, value=dict(multipart_fields or {}))


class FormUrlencodedDecoder(ContentDecoder):
    """
    ``a=1&b=2`` -> ``{"a": "1", "b": "2"}``.

    Unlike the query string there is no presence flag: a pair without '='
    keeps its key with an undefined value (None).
    """

    content_type = "application/x-www-form-urlencoded"

    def decode(self, body, method, multipart_fields=None):
        fields: Dict[str, Optional[str]] = {}
        for raw_pair in body.decode("utf-8", errors="replace").split("&"):
            key, sep, value = raw_pair.partition("=")
            fields[key] = unquote_plus(value) if sep else None
        return DecodedContent(kind=ContentKind.FORM_FIELDS, value=fields)


class XmlDecoder(ContentDecoder):
    content_type = "application/xml"

    def decode(self, body, method, multipart_fields=None):
        try:
            return DecodedContent(kind=ContentKind.XML, value=ElementTree.fromstring(body))
        except (ElementTree.ParseError, LookupError, ValueError) as e:
            logger.warning(
                "Failed to parse request body as XML",
                extra={"content_type": self.content_type, "error": str(e)},
            )
            return DecodedContent.absent(warning=f"Invalid XML body: {e}")


def build_decoder_table(xml_enabled: bool = True) -> Dict[str, ContentDecoder]:
    decoders = [JsonDecoder(), MultipartDecoder(), FormUrlencodedDecoder()]
    if xml_enabled:
        decoders.append(XmlDecoder())
    return {decoder.content_type: decoder for decoder in decoders}


def decode_body(
    content_type: str,
    method: str,
    body: bytes,
    multipart_fields: Optional[Dict[str, Any]] = None,
    decoders: Optional[Dict[str, ContentDecoder]] = None,
) -> DecodedContent:
    """
    Dispatch on the content type token (parameters ignored).

    Unknown types are kept as raw bytes.
    """
    if decoders is None:
        decoders = build_decoder_table()

    decoder = decoders.get(strip_content_type(content_type))
    if decoder is None:
        return DecodedContent(kind=ContentKind.RAW_BYTES, value=body)
    return decoder.decode(body, method, multipart_fields)

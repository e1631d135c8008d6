"""
Decoded content models.

The shape of a request body depends on its content type; ``ContentKind`` tags it.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ContentKind(str, Enum):
    JSON = "json"
    FORM_FIELDS = "form_fields"
    MULTIPART_FIELDS = "multipart_fields"
    XML = "xml"
    RAW_BYTES = "raw_bytes"
    OVERRIDE = "override"
    ABSENT = "absent"


class DecodedContent(BaseModel):
    """
    Body decoding result.

    A set ``warning`` marks the decoded-with-warning state (malformed body,
    method mismatch). In that case ``kind`` is ``ABSENT`` and ``value`` is None.
    """

    model_config = ConfigDict(frozen=True)

    kind: ContentKind
    value: Any = None
    warning: Optional[str] = None

    @classmethod
    def absent(cls, warning: Optional[str] = None) -> "DecodedContent":
        return cls(kind=ContentKind.ABSENT, warning=warning)

    @property
    def is_absent(self) -> bool:
        return self.kind is ContentKind.ABSENT

    @property
    def has_warning(self) -> bool:
        return self.warning is not None

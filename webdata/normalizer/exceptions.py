"""
Where: webdata/normalizer/exceptions.py
What: Exception hierarchy for request normalization.
Why: Only environment-level failures are raised; body decode problems are not exceptions.
"""

from typing import Iterable


class NormalizerError(Exception):
    """Base exception class for request normalization."""

    pass


class MissingTransportFieldError(NormalizerError):
    """Raised when the transport snapshot lacks mandatory fields."""

    def __init__(self, fields: Iterable[str]):
        self.fields = tuple(fields)
        super().__init__(f"Missing transport fields: {', '.join(self.fields)}")

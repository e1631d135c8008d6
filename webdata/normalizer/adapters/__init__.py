"""
Transport adapters package.

Bridges server frameworks to the TransportSnapshot input contract.
"""

from .asgi import build_environ, snapshot_from_request

__all__ = [
    "build_environ",
    "snapshot_from_request",
]

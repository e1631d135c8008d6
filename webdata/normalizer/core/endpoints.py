"""
Endpoint resolution.

A present ``x-forwarded-for`` header is taken at face value: the directly
connected peer becomes the proxy endpoint. Nothing is verified.
"""

from typing import Any, Mapping

from ..models.endpoint import UNKNOWN_PORT, Endpoints, format_endpoint

FORWARDED_FOR_HEADER = "x-forwarded-for"


def resolve_endpoints(environ: Mapping[str, Any], headers: Mapping[str, str]) -> Endpoints:
    peer = format_endpoint(environ["REMOTE_ADDR"], environ["REMOTE_PORT"])
    local = format_endpoint(environ["SERVER_ADDR"], environ["SERVER_PORT"])

    forwarded_for = headers.get(FORWARDED_FOR_HEADER)
    if forwarded_for is not None:
        return Endpoints(
            remote=format_endpoint(forwarded_for, UNKNOWN_PORT),
            proxy=peer,
            local=local,
        )
    return Endpoints(remote=peer, local=local)

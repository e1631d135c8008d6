"""
Where: webdata/normalizer/adapters/asgi.py
What: Builds a TransportSnapshot from a FastAPI/Starlette Request.
Why: Lets ASGI applications feed the normalizer without hand-building a CGI environment.
"""

from typing import Any, Dict, Optional

from fastapi import Request

from ..core.body import strip_content_type
from ..models.transport import HEADER_PREFIX, TransportSnapshot

# Not prefixed with HTTP_ in a CGI environment.
_UNPREFIXED_HEADERS = {"content-type": "CONTENT_TYPE", "content-length": "CONTENT_LENGTH"}


def _environ_key(header_name: str) -> str:
    unprefixed = _UNPREFIXED_HEADERS.get(header_name)
    if unprefixed:
        return unprefixed
    return HEADER_PREFIX + header_name.upper().replace("-", "_")


def build_environ(request: Request) -> Dict[str, Any]:
    """
    Map the ASGI scope and headers onto CGI-style keys.

    Repeated headers are joined with ", ". Socket addresses are only set when
    the server reports them.
    """
    scope = request.scope
    raw_path = scope.get("raw_path") or request.url.path.encode("utf-8")
    target = raw_path.decode("latin-1")
    query_string = scope.get("query_string", b"")
    if query_string:
        target = f"{target}?{query_string.decode('latin-1')}"

    environ: Dict[str, Any] = {
        "REQUEST_METHOD": request.method,
        "REQUEST_SCHEME": request.url.scheme,
        "REQUEST_URI": target,
    }

    for name, value in request.headers.items():
        key = _environ_key(name)
        if key in environ:
            environ[key] = f"{environ[key]}, {value}"
        else:
            environ[key] = value

    server = scope.get("server")
    if "HTTP_HOST" not in environ and server:
        environ["HTTP_HOST"] = server[0]
    if request.client is not None:
        environ["REMOTE_ADDR"] = request.client.host
        environ["REMOTE_PORT"] = request.client.port
    if server:
        environ["SERVER_ADDR"] = server[0]
        environ["SERVER_PORT"] = server[1]

    return environ


async def snapshot_from_request(request: Request) -> TransportSnapshot:
    """
    Buffer the whole request and capture it as a TransportSnapshot.

    Multipart POST bodies are parsed here (Starlette's form parser) and handed
    over as ``multipart_fields``.
    """
    environ = build_environ(request)
    body = await request.body()

    multipart_fields: Optional[Dict[str, Any]] = None
    content_type = environ.get("CONTENT_TYPE")
    if (
        content_type
        and strip_content_type(content_type) == "multipart/form-data"
        and request.method.upper() == "POST"
    ):
        form = await request.form()
        multipart_fields = {key: value for key, value in form.items()}

    return TransportSnapshot(environ=environ, body=body, multipart_fields=multipart_fields)

import pytest


@pytest.fixture
def environ():
    """Minimal well-formed CGI environment for a direct (unproxied) GET."""
    return {
        "REQUEST_METHOD": "GET",
        "REQUEST_SCHEME": "HTTPS",
        "HTTP_HOST": "example.com",
        "REQUEST_URI": "/",
        "REMOTE_ADDR": "10.0.0.1",
        "REMOTE_PORT": "443",
        "SERVER_ADDR": "192.168.1.10",
        "SERVER_PORT": "8443",
    }


@pytest.fixture
def post_environ(environ):
    """Returns a builder for POST environments with a given content type."""

    def _build(content_type: str, **extra):
        env = dict(environ, REQUEST_METHOD="POST", CONTENT_TYPE=content_type)
        env.update(extra)
        return env

    return _build

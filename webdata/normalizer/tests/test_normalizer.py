"""
Where: webdata/normalizer/tests/test_normalizer.py
What: End-to-end tests for RequestNormalizer and parse_request.
Why: Validate the five steps together on realistic transport snapshots.
"""

import pytest
from pydantic import ValidationError

from webdata.normalizer.core.normalizer import RequestNormalizer, parse_request
from webdata.normalizer.exceptions import MissingTransportFieldError, NormalizerError
from webdata.normalizer.models.content import ContentKind
from webdata.normalizer.models.transport import REQUIRED_ENVIRON_KEYS, TransportSnapshot


def test_basic_get(environ):
    environ["REQUEST_URI"] = "/admin/user-management/?user=admin&ref_id=32543&show_name"

    request = parse_request(environ)

    assert request.method == "get"
    assert request.scheme == "https"
    assert request.host == "example.com"
    assert request.raw_uri == (
        "https://example.com/admin/user-management/?user=admin&ref_id=32543&show_name"
    )
    assert request.path == ("admin", "user-management")
    assert request.query == {"user": "admin", "ref_id": "32543", "show_name": True}
    assert request.remote_endpoint == "10.0.0.1:443"
    assert request.proxy_endpoint is None
    assert request.local_endpoint == "192.168.1.10:8443"


def test_raw_uri_is_decoded_target(environ):
    environ["REQUEST_URI"] = "/files/my%20file.txt"

    request = parse_request(environ)

    assert request.raw_uri == "https://example.com/files/my file.txt"
    assert request.path == ("files", "my file.txt")


def test_root_target_has_empty_path(environ):
    assert parse_request(environ).path == ()


def test_duplicate_query_key_first_wins(environ):
    environ["REQUEST_URI"] = "/?k1=v1&k2&k1=v2"

    request = parse_request(environ)

    assert request.get_query("k1") == "v1"
    assert request.get_query("k2") is True


def test_header_lookup_any_spelling(environ):
    environ["HTTP_ACCEPT_ENCODING"] = "gzip"

    request = parse_request(environ)

    assert request.headers["accept-encoding"] == "gzip"
    for name in ("Accept_Encoding", "accept-encoding", "ACCEPT-ENCODING"):
        assert request.get_header(name) == "gzip"


def test_content_type_is_stripped_but_header_kept(post_environ):
    env = post_environ("application/json; charset=utf-8", CONTENT_LENGTH="7")

    request = parse_request(env, body=b'{"x":1}')

    assert request.content_type == "application/json"
    assert request.get_content_type() == "application/json"
    assert request.headers["content-type"] == "application/json; charset=utf-8"
    assert request.headers["content-length"] == "7"
    assert request.content.kind is ContentKind.JSON
    assert request.content.value == {"x": 1}


def test_proxy_detection(environ):
    environ["HTTP_X_FORWARDED_FOR"] = "203.0.113.5"

    request = parse_request(environ)

    assert request.remote_endpoint == "203.0.113.5:-1"
    assert request.proxy_endpoint == "10.0.0.1:443"
    assert request.local_endpoint == "192.168.1.10:8443"


def test_form_body(post_environ):
    request = parse_request(post_environ("application/x-www-form-urlencoded"), body=b"a=1&b=2")

    assert request.is_method("POST")
    assert request.content.kind is ContentKind.FORM_FIELDS
    assert request.content.value == {"a": "1", "b": "2"}


def test_invalid_json_does_not_raise(post_environ):
    request = parse_request(post_environ("application/json"), body=b"{broken")

    assert request.content_type == "application/json"
    assert request.content.is_absent
    assert request.content.has_warning


def test_multipart_on_get_is_absent(environ):
    environ["CONTENT_TYPE"] = "multipart/form-data; boundary=abc"

    request = parse_request(environ, multipart_fields={"name": "alice"})

    assert request.content_type == "multipart/form-data"
    assert request.content.is_absent
    assert request.content.has_warning


def test_multipart_on_post_uses_transport_fields(post_environ):
    request = parse_request(
        post_environ("multipart/form-data; boundary=abc"), multipart_fields={"name": "alice"}
    )

    assert request.content.kind is ContentKind.MULTIPART_FIELDS
    assert request.content.value == {"name": "alice"}


def test_no_content_type_means_no_content(environ):
    request = parse_request(environ, body=b"ignored")

    assert request.content_type is None
    assert request.get_content_type() is None
    assert request.content.is_absent
    assert request.content.has_warning is False
    assert "content-type" not in request.headers


def test_content_type_with_empty_body_is_not_absent(post_environ):
    request = parse_request(post_environ("text/plain"), body=b"")

    assert request.content_type == "text/plain"
    assert request.content.kind is ContentKind.RAW_BYTES
    assert request.content.value == b""


def test_content_override_skips_decoding(post_environ):
    request = parse_request(
        post_environ("application/json"), body=b"{broken", content_override={"preset": True}
    )

    assert request.content.kind is ContentKind.OVERRIDE
    assert request.content.value == {"preset": True}
    assert request.content_type == "application/json"


def test_content_override_ignored_without_content_type(environ):
    request = parse_request(environ, content_override={"preset": True})

    assert request.content.is_absent


def test_xml_disabled_normalizer(post_environ):
    normalizer = RequestNormalizer(xml_enabled=False)
    snapshot = TransportSnapshot(environ=post_environ("application/xml"), body=b"<a/>")

    request = normalizer.normalize(snapshot)

    assert request.content.kind is ContentKind.RAW_BYTES


@pytest.mark.parametrize("missing_key", REQUIRED_ENVIRON_KEYS)
def test_missing_required_field_raises(environ, missing_key):
    del environ[missing_key]

    with pytest.raises(MissingTransportFieldError) as exc_info:
        parse_request(environ)

    assert exc_info.value.fields == (missing_key,)
    assert isinstance(exc_info.value, NormalizerError)


def test_missing_fields_are_all_reported():
    with pytest.raises(MissingTransportFieldError) as exc_info:
        parse_request({"REQUEST_METHOD": "GET"})

    assert "REQUEST_METHOD" not in exc_info.value.fields
    assert "HTTP_HOST" in exc_info.value.fields
    assert "SERVER_PORT" in exc_info.value.fields


def test_parsed_request_is_immutable(environ):
    request = parse_request(environ)

    with pytest.raises(ValidationError):
        request.method = "post"


def test_headers_and_query_are_read_only(environ):
    environ["REQUEST_URI"] = "/?page=2"
    request = parse_request(environ)

    with pytest.raises(TypeError):
        request.headers["x-injected"] = "1"
    with pytest.raises(TypeError):
        request.query["page"] = "3"

    assert request.get_header("x-injected") is None
    assert request.get_query("page") == "2"


def test_content_override_is_not_shared_with_caller(post_environ):
    override = {"items": [1, 2]}
    request = parse_request(post_environ("application/json"), content_override=override)

    override["items"].append(3)
    override["extra"] = True

    assert request.content.value == {"items": [1, 2]}


def test_snapshot_copies_environ(environ):
    snapshot = TransportSnapshot(environ=environ)
    environ["REQUEST_METHOD"] = "DELETE"

    request = RequestNormalizer().normalize(snapshot)

    assert request.method == "get"

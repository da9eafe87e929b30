from starlette.requests import Request
from starlette.responses import Response

from codejson.api.log_serializers import (
    _clean_headers,
    get_logger_request_serializer,
    get_logger_response_serializer,
)


def _request(headers) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "https",
        "server": ("api.code.gov", 443),
        "path": "/repos",
        "query_string": b"q=gsa",
        "headers": [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in headers],
        "client": ("10.0.0.7", 52100),
    }
    return Request(scope)


def test_request_serializer_redacts_api_key() -> None:
    req = _request([("X-API-Key", "secret"), ("Host", "api.code.gov"), ("X-Request-ID", "r-1")])

    out = get_logger_request_serializer(req)

    assert out["id"] == "r-1"
    assert out["method"] == "GET"
    assert out["url"] == "https://api.code.gov/repos?q=gsa"
    assert "x-api-key" not in out["headers"]
    assert out["headers"]["host"] == "api.code.gov"
    assert out["remoteAddress"] == "10.0.0.7"
    assert out["remotePort"] == 52100


def test_request_serializer_prefers_state_request_id() -> None:
    req = _request([("X-Request-ID", "from-header")])
    req.state.request_id = "from-state"

    assert get_logger_request_serializer(req)["id"] == "from-state"


def test_response_serializer_redacts_api_key() -> None:
    resp = Response(content="ok", status_code=201, headers={"x-api-key": "secret", "x-trace": "t"})

    out = get_logger_response_serializer(resp)

    assert out["statusCode"] == 201
    assert out["header"]["x-trace"] == "t"
    assert "x-api-key" not in out["header"]


def test_clean_headers_matches_names_case_insensitively() -> None:
    headers = {"X-API-Key": "secret", "X-Api-KEY": "other", "Accept": "application/json"}

    assert _clean_headers(headers) == {"Accept": "application/json"}
    assert headers["X-API-Key"] == "secret"

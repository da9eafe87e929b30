from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from starlette.requests import Request
from starlette.responses import Response

from codejson.utils.collection_ops import omit_deep_keys

from .models import RequestLogRecord, ResponseLogRecord

REDACTED_HEADERS = ("x-api-key",)


def _clean_headers(headers: Mapping[str, Any], redact: Iterable[str] = REDACTED_HEADERS) -> Dict[str, Any]:
    # Header names are case-insensitive; match on the lowercased name.
    redacted = {h.lower() for h in redact}
    names = [k for k in headers.keys() if k.lower() in redacted]
    return omit_deep_keys(dict(headers.items()), names)


def get_logger_request_serializer(request: Request) -> Dict[str, Any]:
    """Log view of a request with API keys stripped from its headers."""

    client = request.client
    record = RequestLogRecord(
        id=getattr(request.state, "request_id", None) or request.headers.get("x-request-id"),
        method=request.method,
        url=str(request.url),
        headers=_clean_headers(request.headers),
        remoteAddress=client.host if client else None,
        remotePort=client.port if client else None,
    )
    return record.model_dump()


def get_logger_response_serializer(response: Response) -> Dict[str, Any]:
    """Log view of a response with API keys stripped from its headers."""

    record = ResponseLogRecord(
        statusCode=response.status_code,
        header=_clean_headers(response.headers),
    )
    return record.model_dump()

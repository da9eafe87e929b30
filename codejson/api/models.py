from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class RequestLogRecord(BaseModel):
    """Request fields safe to write to the access log."""

    id: Optional[str] = None
    method: str
    url: str
    headers: Dict[str, Any] = Field(default_factory=dict)
    remoteAddress: Optional[str] = None
    remotePort: Optional[int] = None


class ResponseLogRecord(BaseModel):
    """Response fields safe to write to the access log."""

    statusCode: int
    header: Dict[str, Any] = Field(default_factory=dict)

from __future__ import annotations

"""Minimal HTTP primitives used by the socket server.

The server parses requests into :class:`HttpRequest` objects and writes back
whatever :class:`HttpResponse` the handler chain produces.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(slots=True)
class HttpRequest:
    """Represents an HTTP/1.1 request received by the server."""

    method: str
    target: str
    path: str
    query: str
    headers: Dict[str, str]
    body: bytes
    client: Optional[Tuple[str, int]] = None


@dataclass(slots=True)
class HttpResponse:
    """Status, headers and payload sent back for a single request."""

    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def ensure_content_length(self) -> None:
        """Guarantee the ``Content-Length`` header is present."""

        if "Content-Length" not in self.headers:
            self.headers["Content-Length"] = str(len(self.body))


class Handler:
    """Chain-of-responsibility handler interface."""

    def set_next(self, handler: "Handler") -> "Handler":
        raise NotImplementedError

    def handle(self, ctx: "RequestContext") -> HttpResponse:
        raise NotImplementedError


@dataclass(slots=True)
class RequestContext:
    """Mutable context passed across the handler chain."""

    request: HttpRequest
    response: Optional[HttpResponse] = None


__all__ = [
    "Handler",
    "HttpRequest",
    "HttpResponse",
    "RequestContext",
]

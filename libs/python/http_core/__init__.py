"""Shared HTTP server primitives."""

from .http import Handler, HttpRequest, HttpResponse, RequestContext
from .server import RequestHandler, run_server

__all__ = [
    "Handler",
    "HttpRequest",
    "HttpResponse",
    "RequestContext",
    "RequestHandler",
    "run_server",
]

from __future__ import annotations

import logging
import time
from http import HTTPStatus
from typing import Optional

from libs.python.http_core import Handler, HttpRequest, HttpResponse, RequestContext

from .config import ServerConfig
from .resolver import Resolver

access_logger = logging.getLogger("spa_server.access")
logger = logging.getLogger("spa_server.handlers")


def plain_error(status: HTTPStatus | int, message: str) -> HttpResponse:
    return HttpResponse(int(status), {"Content-Type": "text/plain"}, message.encode())


def request_path(request: HttpRequest) -> str:
    """Return the path handed to the resolver.

    Origin-form targets are used verbatim, query string included, so
    ``/main.js?v=3`` names a file that does not exist and falls back to
    ``index.html``.
    """

    if request.target.startswith("/"):
        return request.target
    return request.path


class AbstractHandler(Handler):
    def __init__(self) -> None:
        self._next: Optional[Handler] = None

    def set_next(self, handler: Handler) -> Handler:
        self._next = handler
        return handler

    def _handle_next(self, ctx: RequestContext) -> HttpResponse:
        if self._next is None:
            if ctx.response is None:
                ctx.response = plain_error(HTTPStatus.INTERNAL_SERVER_ERROR, "Unhandled request")
            return ctx.response
        return self._next.handle(ctx)


class LoggingHandler(AbstractHandler):
    def handle(self, ctx: RequestContext) -> HttpResponse:
        start = time.perf_counter()
        response = self._handle_next(ctx)
        duration_ms = round((time.perf_counter() - start) * 1000, 1)
        access_logger.info(
            "%s %s %s %sms remote=%s",
            ctx.request.method,
            ctx.request.path,
            int(response.status),
            duration_ms,
            ctx.request.client[0] if ctx.request.client else "-",
        )
        return response


class ErrorHandler(AbstractHandler):
    def handle(self, ctx: RequestContext) -> HttpResponse:
        try:
            return self._handle_next(ctx)
        except Exception:  # noqa: BLE001
            logger.exception("error resolving %s", ctx.request.path)
            ctx.response = plain_error(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal Server Error")
            return ctx.response


class ResolveHandler(AbstractHandler):
    """Terminal handler: every method and path goes to the resolver."""

    def __init__(self, resolver: Resolver) -> None:
        super().__init__()
        self._resolver = resolver

    def handle(self, ctx: RequestContext) -> HttpResponse:
        ctx.response = self._resolver.resolve(request_path(ctx.request))
        return ctx.response


class RequestProcessor:
    """Facade executed by the socket server."""

    def __init__(self, entry: Handler) -> None:
        self._entry = entry

    def handle(self, request: HttpRequest) -> HttpResponse:
        ctx = RequestContext(request=request)
        response = self._entry.handle(ctx)
        response.ensure_content_length()
        return response


def build_handler(resolver: Resolver) -> RequestProcessor:
    logging_handler = LoggingHandler()
    error_handler = ErrorHandler()
    resolve_handler = ResolveHandler(resolver)

    logging_handler.set_next(error_handler)
    error_handler.set_next(resolve_handler)

    return RequestProcessor(logging_handler)


def build_handler_from_config(config: ServerConfig) -> RequestProcessor:
    resolver = Resolver(config.document_root, fallback_document=config.fallback_document)
    return build_handler(resolver)


__all__ = [
    "build_handler",
    "build_handler_from_config",
    "RequestProcessor",
]

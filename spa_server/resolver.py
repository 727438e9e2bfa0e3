from __future__ import annotations

"""Maps a request path to the response served by the SPA server.

Resolution happens in two steps. The primary lookup serves the file the path
names. When that file does not exist, the fallback lookup serves the root
document instead so the single-page app's client-side router can handle the
URL. Any other read failure becomes a plain 500.
"""

import os
from http import HTTPStatus
from typing import Mapping

from libs.python.http_core import HttpResponse

from .config import FALLBACK_DOCUMENT
from .content_types import CONTENT_TYPES, content_type_for
from .files import FileReadError, FileReader, read_file

FALLBACK_CONTENT_TYPE = "text/html"
FALLBACK_ERROR_BODY = b"Error loading index.html"


class Resolver:
    """Turns a request path into an :class:`HttpResponse`.

    Paths are joined to ``document_root`` and normalized, keeping a trailing
    slash. ``..`` segments are collapsed but nothing keeps the result inside
    the root.
    """

    def __init__(
        self,
        document_root: str,
        *,
        fallback_document: str = FALLBACK_DOCUMENT,
        reader: FileReader = read_file,
        content_types: Mapping[str, str] = CONTENT_TYPES,
    ) -> None:
        self._document_root = document_root
        self._fallback_path = os.path.join(document_root, fallback_document)
        self._read = reader
        self._content_types = content_types

    def map_path(self, request_path: str) -> str:
        if request_path == "/":
            return self._fallback_path
        joined = os.path.normpath(os.path.join(self._document_root, request_path.lstrip("/")))
        if request_path.endswith("/") and not joined.endswith(os.sep):
            joined += os.sep
        return joined

    def resolve(self, request_path: str) -> HttpResponse:
        file_path = self.map_path(request_path)
        content_type = content_type_for(file_path, self._content_types)
        try:
            content = self._read(file_path)
        except FileReadError as exc:
            if exc.not_found:
                return self._resolve_fallback()
            return _server_error(f"Server Error: {exc.code}".encode())
        return _ok(content_type, content)

    def _resolve_fallback(self) -> HttpResponse:
        try:
            content = self._read(self._fallback_path)
        except FileReadError:
            return _server_error(FALLBACK_ERROR_BODY)
        return _ok(FALLBACK_CONTENT_TYPE, content)


def _ok(content_type: str, body: bytes) -> HttpResponse:
    return HttpResponse(int(HTTPStatus.OK), {"Content-Type": content_type}, body)


def _server_error(body: bytes) -> HttpResponse:
    # No Content-Type on errors; the client sees whatever its default is.
    return HttpResponse(int(HTTPStatus.INTERNAL_SERVER_ERROR), {}, body)


__all__ = ["FALLBACK_ERROR_BODY", "Resolver"]

from __future__ import annotations

"""Extension to ``Content-Type`` lookup for served files."""

import os
from types import MappingProxyType
from typing import Mapping

DEFAULT_CONTENT_TYPE = "text/html"

CONTENT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        ".js": "text/javascript",
        ".css": "text/css",
        ".json": "application/json",
        ".png": "image/png",
        ".jpg": "image/jpg",
    }
)


def content_type_for(path: str, table: Mapping[str, str] = CONTENT_TYPES) -> str:
    """Return the content type for ``path`` based on its extension.

    Matching is exact and case-sensitive, so ``app.JS`` is served as
    ``text/html`` like any other unknown extension.
    """

    _, extension = os.path.splitext(path)
    return table.get(extension, DEFAULT_CONTENT_TYPE)


__all__ = ["CONTENT_TYPES", "DEFAULT_CONTENT_TYPE", "content_type_for"]

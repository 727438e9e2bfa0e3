from __future__ import annotations

import errno
from typing import Callable

FileReader = Callable[[str], bytes]


class FileReadError(Exception):
    """Raised when a file under the document root cannot be read."""

    def __init__(self, path: str, code: str) -> None:
        super().__init__(f"{code}: {path}")
        self.path = path
        self.code = code

    @property
    def not_found(self) -> bool:
        return self.code == "ENOENT"


def _error_code(exc: OSError) -> str:
    if exc.errno is not None and exc.errno in errno.errorcode:
        return errno.errorcode[exc.errno]
    return type(exc).__name__


def read_file(path: str) -> bytes:
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        raise FileReadError(path, _error_code(exc)) from exc


__all__ = ["FileReadError", "FileReader", "read_file"]

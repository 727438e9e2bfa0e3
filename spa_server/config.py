from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent
DEFAULT_DOCUMENT_ROOT = PROJECT_ROOT / "build" / "web"
FALLBACK_DOCUMENT = "index.html"


@dataclass(frozen=True)
class ServerConfig:
    host: str
    port: int
    document_root: str
    fallback_document: str = FALLBACK_DOCUMENT
    log_level: str = "INFO"


def _coerce_port(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"invalid port number: {raw}") from exc
    if value < 0 or value > 65535:
        raise ValueError(f"invalid port number: {raw}")
    return value


def load_config() -> ServerConfig:
    host = os.environ.get("SPA_SERVER_HOST", "0.0.0.0")
    port = _coerce_port(os.environ.get("SPA_SERVER_PORT", "5000"))
    document_root = os.environ.get("SPA_SERVER_ROOT") or str(DEFAULT_DOCUMENT_ROOT)
    log_level = os.environ.get("SPA_SERVER_LOG_LEVEL", "INFO").upper()
    return ServerConfig(host=host, port=port, document_root=document_root, log_level=log_level)


__all__ = ["DEFAULT_DOCUMENT_ROOT", "FALLBACK_DOCUMENT", "ServerConfig", "load_config"]

from __future__ import annotations

import logging
import sys

from libs.python.http_core import run_server

from .config import ServerConfig, load_config
from .handlers import build_handler_from_config


def _print_banner(config: ServerConfig) -> None:
    print(f"Server running at http://localhost:{config.port}/")
    print(f"Server also accessible at http://127.0.0.1:{config.port}/")


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("spa_server").debug("serving files from %s", config.document_root)
    processor = build_handler_from_config(config)
    _print_banner(config)
    run_server(processor, config.port, host=config.host)


def cli() -> None:  # pragma: no cover - cli entry point
    try:
        main()
    except Exception as exc:  # noqa: BLE001
        print(f"[spa-server] fatal error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - cli entry point
    cli()

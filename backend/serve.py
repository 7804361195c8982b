"""Launch script that binds the listening socket before starting Uvicorn."""

from __future__ import annotations

import logging
import socket

import uvicorn

from backend.application import create_app
from backend.core.config import Settings, get_settings
from backend.core.logging import build_logger


def bind_socket(host: str, port: int) -> socket.socket:
    """Return a listening TCP socket; raises ``OSError`` if the address is taken."""

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def run(settings: Settings, logger: logging.Logger) -> None:
    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as exc:
        logger.error("Server failed to start: %s", exc)
        raise SystemExit(1) from exc

    app = create_app(settings, logger=logger)

    logger.info("Backend server starting on port %s...", settings.port)
    config = uvicorn.Config(app, log_level=settings.log_level.lower())
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    settings = get_settings()
    run(settings, build_logger(settings))


if __name__ == "__main__":
    main()

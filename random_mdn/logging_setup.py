from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# third-party loggers that are too chatty for a one-shot job
_QUIET = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "requests_oauthlib": logging.WARNING,
    "tweepy": logging.INFO,
}

_installed: list[logging.Handler] = []


def _build_handlers(log_file: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(
            RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )
    return handlers


def setup_logging(level: str, log_file: str) -> None:
    """Configure the root logger; calling it again replaces the handlers it added before."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    while _installed:
        old = _installed.pop()
        root.removeHandler(old)
        old.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in _build_handlers(log_file):
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed.append(handler)

    for name, quiet_level in _QUIET.items():
        logging.getLogger(name).setLevel(quiet_level)

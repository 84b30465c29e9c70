"""
Logging helpers for wuzapi.

The library only emits records; it never installs handlers on import.
Request/response records are written when the client config has ``debug=True``:

    wuzapi.request   outgoing method, url, body and auth header name
    wuzapi.response  status and envelope of each reply
    wuzapi.error     every WuzapiError raised by the request pipeline
    wuzapi.webhook   webhook payloads rejected by the dispatcher

Call ``setup_logging("DEBUG")`` to see them on the console.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

ROOT_LOGGER = "wuzapi"

_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim white",
    }
)


def get_logger(namespace: str) -> logging.Logger:
    """Return the ``wuzapi.<namespace>`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{namespace}")


request_logger = get_logger("request")
response_logger = get_logger("response")
error_logger = get_logger("error")
webhook_logger = get_logger("webhook")


def setup_logging(level: str = "INFO", *, console: Console | None = None) -> logging.Handler:
    """Attach a Rich console handler to the ``wuzapi`` logger.

    Only the library's own logger tree is touched. Calling this again replaces
    the handler installed by the previous call.

    Returns:
        The installed handler, so callers can remove it again.
    """
    lvl = level.upper()
    lvl = lvl if lvl in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"

    handler = RichHandler(
        console=console or Console(theme=_theme, stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    handler.set_name("wuzapi-rich")

    logger = logging.getLogger(ROOT_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == "wuzapi-rich":
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(lvl)
    return handler

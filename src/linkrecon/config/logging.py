"""Logging setup for the command line."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# httpx and httpcore log every request at INFO; the controller client logs its own calls.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Configure the root logger for CLI output.

    ``verbose`` switches linkrecon to DEBUG and lets the HTTP libraries log
    each request. ``force`` replaces handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)

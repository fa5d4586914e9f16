"""Logging helpers for fracnorm.

The library is quiet by default. A console handler is attached to the
package logger only while the caller asks for it (ParseOptions(console_log=True)
or debug=True, the CLI --verbose flag). Detaching it puts the logger's level
and propagation back exactly as they were, so a caller's own logging setup
is unaffected afterwards.

The root logger is never configured.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

PACKAGE_LOGGER_NAME = "fracnorm"
_CONSOLE_HANDLER_NAME = "fracnorm_console"
_DEFAULT_FORMAT = "%(name)s: %(message)s"


class _ConsoleHandler(logging.StreamHandler):
    """stderr handler that remembers the logger state it overrode."""

    def __init__(self, saved_state: Tuple[int, bool]):
        super().__init__()
        self.name = _CONSOLE_HANDLER_NAME
        self.saved_state = saved_state


def get_logger(name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)


def _find_console_handler(logger: logging.Logger) -> Optional[_ConsoleHandler]:
    for h in logger.handlers:
        if isinstance(h, _ConsoleHandler):
            return h
    return None


def ensure_console_handler(
    logger: logging.Logger,
    *,
    enabled: bool,
    level: int = logging.INFO,
    fmt: str = _DEFAULT_FORMAT,
) -> bool:
    """Attach or detach the console handler on `logger`.

    Enabling saves ``(level, propagate)`` on the new handler; disabling
    removes the handler and restores that pair. Calls that find nothing to
    change leave the logger untouched.

    Returns True only when this call attached a new handler.
    """
    existing = _find_console_handler(logger)

    if not enabled:
        if existing is not None:
            logger.removeHandler(existing)
            saved_level, saved_propagate = existing.saved_state
            logger.setLevel(saved_level)
            logger.propagate = saved_propagate
        return False

    attached = existing is None
    if attached:
        existing = _ConsoleHandler(saved_state=(logger.level, logger.propagate))
        logger.addHandler(existing)
    existing.setFormatter(logging.Formatter(fmt))

    logger.setLevel(level)
    # Records already go to stderr through this handler.
    logger.propagate = False
    return attached

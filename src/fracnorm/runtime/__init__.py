"""Runtime subpackage.

Only the logging helpers are exported here because the core stages import
them; use `fracnorm.runtime.batch` explicitly for batch evaluation.
"""

from .logging_utils import PACKAGE_LOGGER_NAME, ensure_console_handler, get_logger

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "get_logger",
    "ensure_console_handler",
]

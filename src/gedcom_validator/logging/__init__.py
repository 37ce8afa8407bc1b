"""
Logging package for ``gedcom_validator``.

Use ``get_logger(__name__)`` in modules to log through the shared base logger.
"""

from .logger import (
    get_logger,
    list_active_loggers,
    set_debug,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "set_debug",
]

"""
Centralized logging configuration for applications using the ternary helpers.

This module provides a single setup_logging function that attaches one console
handler to the root logger. Calling it again replaces the handler it installed
previously instead of stacking duplicates. Strict-selection rejections are logged
at DEBUG by ``ternary.conditions``.
"""

import logging
import sys
import threading
from typing import Optional

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_installed_handler: Optional[logging.Handler] = None

_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_console_handler(level: int, user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    return console_handler


def setup_logging(level: int = logging.INFO, user_friendly: bool = False) -> logging.Handler:
    """Configure console logging and return the installed handler"""
    global _installed_handler

    with _config_lock:
        root_logger = logging.getLogger()

        if _installed_handler is not None:
            root_logger.removeHandler(_installed_handler)
            _installed_handler.close()

        console_handler = _build_console_handler(level, user_friendly)
        root_logger.addHandler(console_handler)
        root_logger.setLevel(level)
        _installed_handler = console_handler
        return console_handler


__all__ = ["setup_logging"]

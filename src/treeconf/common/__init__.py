"""Common models and logging helpers used across treeconf modules."""

from .logging import LogLevel, create_logger, disable_library_logging, enable_library_logging
from .models import ROOT_PATH, KeyPath, Subscriber, Unsubscribe

__all__ = [
    "ROOT_PATH",
    "KeyPath",
    "LogLevel",
    "Subscriber",
    "Unsubscribe",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
]

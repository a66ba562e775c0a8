"""Logging helpers."""

from link_header.utils.log import setup_logging, log

__all__ = [
    "setup_logging",
    "log",
]

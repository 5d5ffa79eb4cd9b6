"""Utility modules for the feed backend application."""

from .datetime_utils import utc_now, ensure_utc

__all__ = [
    "utc_now",
    "ensure_utc",
]

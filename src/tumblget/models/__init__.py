"""Data models for tumblget."""

from tumblget.models.cookie import CookieRecord

__all__ = [
    "CookieRecord",
]

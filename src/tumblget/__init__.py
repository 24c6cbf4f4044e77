"""
tumblget - Session and cookie tooling for blog downloaders.

This package parses the legacy comma-joined cookie headers some blog services
send, loads browser cookie exports, and builds httpx clients that carry an
authenticated session.
"""

__version__ = "1.0.0"
__license__ = "AGPL-3.0"

from tumblget.config import Config
from tumblget.http.cookies import parse_cookie_header
from tumblget.models.cookie import CookieRecord

__all__ = ["Config", "CookieRecord", "parse_cookie_header", "__version__"]

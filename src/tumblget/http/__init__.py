"""HTTP and cookie infrastructure for tumblget (async-only).

Uses httpx directly; cookie headers are parsed by tumblget's own scanner.
"""

from tumblget.http.client import (
    collect_cookies,
    create_client,  # Returns AsyncClient
    fetch_cookies,  # Async function
)
from tumblget.http.cookies import (
    load_cookies_from_file,
    parse_cookie_header,
    split_cookie_segments,
)
from tumblget.http.headers import load_headers_from_file

__all__ = [
    "collect_cookies",
    "create_client",
    "fetch_cookies",
    "load_cookies_from_file",
    "load_headers_from_file",
    "parse_cookie_header",
    "split_cookie_segments",
]

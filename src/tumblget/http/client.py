"""HTTP client utilities using httpx directly (async-only).

This module provides helper functions for creating async httpx clients from
Config objects and for reading the cookies a server sets. No custom
wrappers, just direct httpx usage.
"""

import logging
from pathlib import Path
from typing import List, Optional

import httpx

from tumblget.config import Config
from tumblget.http.cookies import load_cookies_from_file, parse_cookie_header
from tumblget.http.headers import load_headers_from_file
from tumblget.models.cookie import CookieRecord

logger = logging.getLogger(__name__)


def create_client(config: Config) -> httpx.AsyncClient:
    """Create an async httpx client from configuration.

    Args:
        config: Configuration object

    Returns:
        Configured httpx.AsyncClient instance

    Example:
        >>> config = Config(cookie_file="cookies.txt")
        >>> async with create_client(config) as client:
        ...     response = await client.get(url)
    """
    # Build headers
    headers = {'User-Agent': config.user_agent}

    # Load additional headers from file
    if config.header_file and Path(config.header_file).exists():
        headers.update(load_headers_from_file(config.header_file))

    # Seed the cookie jar, keeping domain and path of each cookie
    cookies = httpx.Cookies()
    if config.cookie_file and Path(config.cookie_file).exists():
        for record in load_cookies_from_file(config.cookie_file):
            cookies.jar.set_cookie(record.to_cookie())
        logger.info(f"Loaded {len(cookies.jar)} cookie(s) from {config.cookie_file}")

    return httpx.AsyncClient(
        headers=headers,
        cookies=cookies,
        timeout=config.timeout,
        verify=config.verify_ssl,
        follow_redirects=config.follow_redirects,
        http2=True,
        proxy=config.proxy,
    )


def collect_cookies(
    response: httpx.Response,
    default_host: Optional[str] = None,
) -> List[CookieRecord]:
    """Parse the cookies set by a response.

    All ``Set-Cookie`` headers are joined into the legacy comma-separated
    form before parsing, so a server that already folds them into one
    header and one that sends them separately produce the same records.

    Args:
        response: httpx.Response to read headers from
        default_host: Domain fallback (defaults to the response URL host)

    Returns:
        List of CookieRecord objects in header order
    """
    header = ", ".join(response.headers.get_list("set-cookie"))
    host = response.url.host if default_host is None else default_host
    return parse_cookie_header(header, host)


async def fetch_cookies(
    client: httpx.AsyncClient,
    url: str,
    default_host: Optional[str] = None,
) -> List[CookieRecord]:
    """GET a URL and return the cookies the server sets.

    Args:
        client: httpx.AsyncClient instance
        url: URL to request
        default_host: Domain fallback (defaults to the response URL host)

    Returns:
        List of CookieRecord objects

    Raises:
        httpx.HTTPError: If the request fails or returns an error status
    """
    response = await client.get(url)
    response.raise_for_status()

    cookies = collect_cookies(response, default_host)
    logger.info(f"{url} set {len(cookies)} cookie(s)")
    return cookies

"""Cookie header and cookie file parsing.

Servers that fold several ``Set-Cookie`` headers into one line separate the
cookies with commas, but the ``expires`` attribute carries an RFC 1123 date
that has a comma of its own (``Wed, 09 Jun 2025 10:18:14 GMT``). The header
is therefore split by a small scanner that knows when it is inside an
expires value, instead of a plain ``str.split``.

Also supports the Netscape cookie file format used by browsers and curl.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from tumblget.models.cookie import CookieRecord

logger = logging.getLogger(__name__)

# Attributes kept on the record besides domain, path and expires
RECOGNIZED_ATTRIBUTES = frozenset([
    "max-age",
    "secure",
    "httponly",
    "samesite",
    "version",
    "comment",
    "commenturl",
    "discard",
    "port",
])

WEEKDAY_NAMES = frozenset([
    "mon", "tue", "wed", "thu", "fri", "sat", "sun",
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
])

_EXPIRES_KEY = re.compile(r'\s*expires\s*=', re.IGNORECASE)


def _date_comma(value: str) -> bool:
    """Whether a comma after this partial expires value belongs to the date."""
    value = value.strip()
    if value.startswith('"'):
        # Still inside a quoted date
        if value.count('"') == 1:
            return True
        value = value.strip('"')
    return value.lower() in WEEKDAY_NAMES


def split_cookie_segments(header: str) -> List[str]:
    """Split a comma-joined cookie header into raw cookie segments.

    A comma is a cookie boundary unless the scanner is inside an ``expires``
    value and everything read of that value so far is a weekday name, or the
    value is a quoted date whose closing quote has not been reached yet. Once
    the weekday comma has been consumed, the value no longer matches, so the
    next comma ends the cookie again.

    Args:
        header: Raw header text

    Returns:
        List of untrimmed segments, in input order
    """
    segments = []
    start = 0
    inside_expires = False
    value_start = 0

    for pos, char in enumerate(header):
        if char == ';':
            match = _EXPIRES_KEY.match(header, pos + 1)
            inside_expires = match is not None
            if match:
                value_start = match.end()
        elif char == ',':
            if inside_expires and _date_comma(header[value_start:pos]):
                continue
            segments.append(header[start:pos])
            start = pos + 1
            inside_expires = False

    segments.append(header[start:])
    return segments


def parse_cookie_segment(segment: str, default_host: str) -> Optional[CookieRecord]:
    """Parse a single cookie segment.

    Args:
        segment: One cookie with its ';'-separated attributes
        default_host: Domain used when the segment has no (or an empty) domain

    Returns:
        CookieRecord, or None if the segment has no name=value pair
    """
    segment = segment.strip()
    if not segment:
        return None

    pair, _, attribute_text = segment.partition(';')
    name, separator, value = pair.partition('=')
    name = name.strip()

    if not separator or not name:
        logger.debug(f"Skipping malformed cookie segment: {segment!r}")
        return None

    domain = None
    path = None
    expires = None
    attributes: Dict[str, Optional[str]] = {}

    for token in attribute_text.split(';'):
        token = token.strip()
        if not token:
            continue

        key, separator, attr_value = token.partition('=')
        key = key.strip().lower()
        attr_value = attr_value.strip() if separator else None

        if key == 'domain':
            domain = attr_value
        elif key == 'path':
            path = attr_value
        elif key == 'expires':
            expires = (attr_value or '').strip('"') or None
        elif key in RECOGNIZED_ATTRIBUTES:
            attributes[key] = attr_value
        else:
            logger.debug(f"Ignoring unknown cookie attribute {key!r} on {name!r}")

    return CookieRecord(
        name=name,
        value=value.strip(),
        domain=domain or default_host,
        path=path or '/',
        expires=expires,
        attributes=attributes,
    )


def parse_cookie_header(header: Optional[str], default_host: str) -> List[CookieRecord]:
    """Parse a comma-joined cookie header into cookie records.

    Malformed segments are skipped; they never affect their neighbours.

    Args:
        header: Raw header text, may be empty
        default_host: Host used as the domain fallback, must not be empty

    Returns:
        List of CookieRecord objects in header order

    Raises:
        ValueError: If default_host is empty

    Example:
        >>> cookies = parse_cookie_header(
        ...     "sid=abc; expires=Wed, 09 Jun 2025 10:18:14 GMT,uid=42",
        ...     "example.com",
        ... )
        >>> [c.name for c in cookies]
        ['sid', 'uid']
    """
    if not default_host or not default_host.strip():
        raise ValueError("default_host must be a non-empty host name")

    if not header:
        return []

    cookies = []
    for segment in split_cookie_segments(header):
        record = parse_cookie_segment(segment, default_host)
        if record is not None:
            cookies.append(record)

    logger.debug(f"Parsed {len(cookies)} cookie(s) for {default_host}")
    return cookies


def load_cookies_from_file(cookie_file: str) -> List[CookieRecord]:
    """Load cookies from Netscape cookie file format.

    The Netscape cookie format is:
    # domain flag path secure expiration name value

    Lines prefixed with ``#HttpOnly_`` are HttpOnly cookies, not comments.
    An expiration of 0 marks a session cookie.

    Args:
        cookie_file: Path to cookie file

    Returns:
        List of CookieRecord objects

    Example file format:
        # Netscape HTTP Cookie File
        .example.com    TRUE    /    FALSE    1735689600    sessionid    abc123
    """
    cookies = []
    cookie_path = Path(cookie_file)

    if not cookie_path.exists():
        return cookies

    with open(cookie_path, 'r') as f:
        for line in f:
            line = line.strip()

            http_only = line.startswith('#HttpOnly_')
            if http_only:
                line = line[len('#HttpOnly_'):]

            # Skip comments and empty lines
            if not line or line.startswith('#'):
                continue

            parts = line.split('\t')
            if len(parts) < 7:
                logger.debug(f"Skipping short cookie file line: {line!r}")
                continue

            domain, _flag, path, secure, expiration, name, value = parts[:7]
            if not domain or not name:
                continue

            attributes = {}
            if secure.upper() == 'TRUE':
                attributes['secure'] = None
            if http_only:
                attributes['httponly'] = None

            cookies.append(CookieRecord(
                name=name,
                value=value,
                domain=domain,
                path=path or '/',
                expires=expiration if expiration not in ('', '0') else None,
                attributes=attributes,
            ))

    return cookies

"""
Cookie record model.

A CookieRecord is the parsed form of one cookie segment taken from a
``Set-Cookie`` style header. Records are immutable once built and carry a
fully resolved domain and path, so consumers (httpx cookie jars, session
stores) never have to apply defaults themselves.
"""

from dataclasses import dataclass, field
from http.cookiejar import Cookie
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class CookieRecord:
    """One parsed cookie.

    Attributes:
        name: Cookie name (text before the first '=')
        value: Cookie value, verbatim, may contain further '=' characters
        domain: Resolved domain (falls back to the request host)
        path: Resolved path (falls back to '/')
        expires: Raw expiry timestamp text, not validated
        attributes: Other recognised attributes, lower-cased name to value
            (None for flags such as ``secure``)
    """
    name: str
    value: str
    domain: str
    path: str = "/"
    expires: Optional[str] = None
    attributes: Mapping[str, Optional[str]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Freeze the attribute mapping along with the record
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def secure(self) -> bool:
        return "secure" in self.attributes

    @property
    def http_only(self) -> bool:
        return "httponly" in self.attributes

    @property
    def max_age(self) -> Optional[int]:
        """Max-Age in seconds, or None when absent or not an integer."""
        raw = self.attributes.get("max-age")
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            return None

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form for JSON output."""
        return {
            "name": self.name,
            "value": self.value,
            "domain": self.domain,
            "path": self.path,
            "expires": self.expires,
            "attributes": dict(self.attributes),
        }

    def to_cookie(self) -> Cookie:
        """Convert to a standard library Cookie for use in a CookieJar.

        The expiry is passed through only when it is a plain epoch value;
        date strings are left for the cookie store to interpret.
        """
        expires = int(self.expires) if self.expires and self.expires.isdigit() else None

        rest = {}
        if self.http_only:
            rest["HttpOnly"] = None
        if "samesite" in self.attributes:
            rest["SameSite"] = self.attributes["samesite"]

        return Cookie(
            version=0,
            name=self.name,
            value=self.value,
            port=None,
            port_specified=False,
            domain=self.domain,
            domain_specified=self.domain.startswith('.'),
            domain_initial_dot=self.domain.startswith('.'),
            path=self.path,
            path_specified=True,
            secure=self.secure,
            expires=expires,
            discard=expires is None,
            comment=self.attributes.get("comment"),
            comment_url=self.attributes.get("commenturl"),
            rest=rest,
            rfc2109=False,
        )

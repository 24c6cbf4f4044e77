"""Configuration management for tumblget."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Configuration for tumblget sessions.

    Holds the default cookie host, authentication inputs (cookie and header
    files) and HTTP client settings.
    """

    # Domain used for cookies that do not name one
    default_host: str = "www.tumblr.com"

    # Authentication
    cookie_file: Optional[str] = None
    header_file: Optional[str] = None

    # HTTP settings
    timeout: int = 30  # seconds
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    proxy: Optional[str] = None
    verify_ssl: bool = True
    follow_redirects: bool = True

    def __post_init__(self):
        """Validate configuration."""
        self.default_host = (self.default_host or "").strip()
        if not self.default_host:
            raise ValueError("default_host must not be empty")

        if self.timeout <= 0:
            raise ValueError(f"Invalid timeout: {self.timeout}")

        # Setup proxy from environment if not specified
        if not self.proxy:
            self.proxy = os.environ.get('HTTPS_PROXY') or os.environ.get('HTTP_PROXY')

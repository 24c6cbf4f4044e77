"""Command-line interface for tumblget using Click."""

import asyncio
import json
import logging
import sys
from typing import List, Optional

import click
import httpx

from tumblget import __version__
from tumblget.config import Config
from tumblget.http.client import create_client, fetch_cookies
from tumblget.http.cookies import parse_cookie_header
from tumblget.models.cookie import CookieRecord
from tumblget.utils.sorting import natural_sort_key


# Setup logging - default to WARNING, INFO only with --verbose
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _enable_verbose_logging():
    logging.getLogger().setLevel(logging.INFO)
    logging.getLogger('httpx').setLevel(logging.INFO)


def _echo_cookies(cookies: List[CookieRecord], as_json: bool):
    """Print cookie records as JSON or as one line per cookie."""
    if as_json:
        click.echo(json.dumps([cookie.to_dict() for cookie in cookies], indent=2))
        return

    for cookie in cookies:
        line = f"{cookie.name}={cookie.value}  domain={cookie.domain}  path={cookie.path}"
        if cookie.expires:
            line += f"  expires={cookie.expires}"
        for key, value in cookie.attributes.items():
            line += f"  {key}" if value is None else f"  {key}={value}"
        click.echo(line)

    click.echo(f"Total: {len(cookies)} cookie(s)")


@click.group(invoke_without_command=True)
@click.option('--version', '-v', is_flag=True, help='Show version and exit')
@click.pass_context
def cli(ctx, version):
    """tumblget - Cookie and session tooling for blog downloaders.

    Parses comma-joined Set-Cookie headers (including expires dates that
    contain commas) and inspects the cookies a server sets.
    """
    if version:
        click.echo(f"tumblget version {__version__}")
        ctx.exit()

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument('header')
@click.option('--host', help='Domain for cookies without one (default: config default host)')
@click.option('--json', 'as_json', is_flag=True, help='Print records as JSON')
@click.option('--verbose', is_flag=True, help='Enable verbose logging')
def parse(header: str, host: Optional[str], as_json: bool, verbose: bool):
    """Parse a cookie header string.

    Example:
        tumblget parse "sid=abc; expires=Wed, 09 Jun 2025 10:18:14 GMT,uid=42"
    """
    if verbose:
        _enable_verbose_logging()

    try:
        default_host = host if host is not None else Config().default_host
        cookies = parse_cookie_header(header, default_host)
    except ValueError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    _echo_cookies(cookies, as_json)


@cli.command()
@click.argument('url')
@click.option('--host', help='Domain for cookies without one (default: URL host)')
@click.option('--cookie-file', help='Path to cookie file (Netscape format)')
@click.option('--header-file', help='Path to header file')
@click.option('--timeout', default=30, help='Request timeout in seconds')
@click.option('--proxy', help='HTTP/HTTPS proxy')
@click.option('--user-agent', '-U', help='Custom user agent')
@click.option('--no-ssl-verify', is_flag=True, help='Disable SSL verification')
@click.option('--json', 'as_json', is_flag=True, help='Print records as JSON')
@click.option('--verbose', is_flag=True, help='Enable verbose logging')
def fetch(
    url: str,
    host: Optional[str],
    cookie_file: Optional[str],
    header_file: Optional[str],
    timeout: int,
    proxy: Optional[str],
    user_agent: Optional[str],
    no_ssl_verify: bool,
    as_json: bool,
    verbose: bool,
):
    """Request a URL and show the cookies it sets.

    Example:
        tumblget fetch "https://www.tumblr.com/login" --cookie-file cookies.txt
    """
    if verbose:
        _enable_verbose_logging()

    try:
        config = Config(
            cookie_file=cookie_file,
            header_file=header_file,
            timeout=timeout,
            proxy=proxy,
            verify_ssl=not no_ssl_verify,
        )
    except ValueError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if user_agent:
        config.user_agent = user_agent

    async def run():
        async with create_client(config) as client:
            return await fetch_cookies(client, url, default_host=host)

    try:
        cookies = asyncio.run(run())
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Failed to fetch cookies from {url}: {e}")
        click.echo(f"✗ Failed: {e}", err=True)
        sys.exit(1)

    _echo_cookies(cookies, as_json)


@cli.command(name='sort')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--reverse', '-r', is_flag=True, help='Sort in descending order')
def sort_lines(file: str, reverse: bool):
    """Print the lines of FILE in natural order (file2 before file10).

    Blank lines and lines starting with '#' are skipped.
    """
    lines = []
    with open(file, 'r') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                lines.append(line)

    for line in sorted(lines, key=natural_sort_key, reverse=reverse):
        click.echo(line)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()

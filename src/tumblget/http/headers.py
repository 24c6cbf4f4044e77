"""Header file parsing utilities.

Supports simple ``Name: value`` header files, e.g. a request copied out of
the browser's developer tools.
"""

from pathlib import Path
from typing import Dict


def load_headers_from_file(header_file: str) -> Dict[str, str]:
    """Load HTTP headers from file.

    Repeated header names are folded into one comma-joined value, the same
    way an HTTP stack combines repeated fields.

    Args:
        header_file: Path to header file

    Returns:
        Dictionary of header name to value

    Example file format:
        Accept: application/json
        Cookie: sid=abc123
        X-Requested-With: XMLHttpRequest
    """
    headers: Dict[str, str] = {}
    header_path = Path(header_file)

    if not header_path.exists():
        return headers

    with open(header_path, 'r') as f:
        for line in f:
            line = line.strip()

            if not line or line.startswith('#') or ':' not in line:
                continue

            name, value = line.split(':', 1)
            name = name.strip()
            if not name:
                continue

            value = value.strip()
            if name in headers:
                headers[name] = f"{headers[name]}, {value}"
            else:
                headers[name] = value

    return headers

"""utils/validators.py

Validation utilities for Urlkit.
"""

import re
from typing import Any, Optional

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

MAX_PORT = 65535


def validate_scheme(scheme: str) -> bool:
    """Check a scheme against ``ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )``."""
    return _SCHEME_RE.fullmatch(scheme) is not None


def validate_port(value: Any) -> Optional[int]:
    """
    Coerce a port to ``int``.

    Args:
        value: An ``int`` or a string of ASCII digits.

    Returns:
        The port number, or None if ``value`` is not a port in 0-65535.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        port = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        port = int(value)
    else:
        return None
    if 0 <= port <= MAX_PORT:
        return port
    return None

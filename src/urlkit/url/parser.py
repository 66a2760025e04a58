"""src/urlkit/url/parser.py

URL parser for Urlkit.
"""

import logging
import re
from typing import Any, Optional, Union

from urlkit.exceptions import UnparseableUrlError
from urlkit.url.components import Component, URLComponents, resolve_component
from urlkit.utils.validators import validate_port

__all__ = ["split_url", "parse"]

logger = logging.getLogger(__name__)

# RFC 3986, appendix B, with the scheme narrowed to its ABNF rule
_URL_RE = re.compile(
    r"(?:(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?",
    re.DOTALL,
)


def _split_authority(authority: str, parts: URLComponents) -> None:
    userinfo, at, hostport = authority.rpartition("@")
    if at:
        user, colon, password = userinfo.partition(":")
        parts[Component.USER.value] = user
        if colon:
            parts[Component.PASS.value] = password

    port_str: Optional[str] = None
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise UnparseableUrlError(f"Unterminated IPv6 literal: {authority!r}")
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        if rest:
            if not rest.startswith(":"):
                raise UnparseableUrlError(f"Garbage after IPv6 literal: {authority!r}")
            port_str = rest[1:]
    elif ":" in hostport:
        host, _, port_str = hostport.rpartition(":")
    else:
        host = hostport

    inner = host[1:-1] if host.startswith("[") else host
    if "[" in inner or "]" in inner:
        raise UnparseableUrlError(f"Misplaced bracket in host: {authority!r}")

    # An empty port after the colon is treated as absent
    port = None
    if port_str:
        port = validate_port(port_str)
        if port is None:
            raise UnparseableUrlError(f"Invalid port: {port_str!r}")

    if not host:
        if at or port is not None:
            raise UnparseableUrlError(f"Authority without host: {authority!r}")
        return
    parts[Component.HOST.value] = host
    if port is not None:
        parts[Component.PORT.value] = port


def split_url(url: str) -> URLComponents:
    """
    Split a URL into its components.

    Only components that occur in ``url`` are present in the result. An
    empty path is omitted unless it is the only thing there is.

    Args:
        url: The URL to split.

    Returns:
        Component mapping; ``port`` is an int, everything else a string.

    Raises:
        UnparseableUrlError: If no sensible split exists.
    """
    if not isinstance(url, str):
        raise UnparseableUrlError(f"Expected a URL string, got {type(url).__name__}")

    match = _URL_RE.fullmatch(url)
    if match is None:  # pragma: no cover
        raise UnparseableUrlError(f"Malformed URL: {url!r}")

    parts: URLComponents = {}
    if match.group("scheme") is not None:
        parts[Component.SCHEME.value] = match.group("scheme")

    authority = match.group("authority")
    if authority is not None:
        _split_authority(authority, parts)

    path = match.group("path")
    if path:
        parts[Component.PATH.value] = path

    for name in (Component.QUERY, Component.FRAGMENT):
        value = match.group(name.value)
        if value is not None:
            parts[name.value] = value

    if not parts:
        parts[Component.PATH.value] = path
    return parts


def parse(
    url: str, component: Optional[Any] = None
) -> Union[URLComponents, str, int, None]:
    """
    Parse a URL, returning every component or just one.

    Args:
        url: The URL to parse.
        component: Optional ``Component`` (or its name) to return alone.

    Returns:
        Without ``component``, the component mapping, or None if the URL
        cannot be parsed. With ``component``, that component's value (an
        int for the port), or None if it is absent.

    Raises:
        UnknownComponentError: If ``component`` is not a recognized name.
    """
    selected = None if component is None else resolve_component(component)

    try:
        parts = split_url(url)
    except UnparseableUrlError as exc:
        logger.debug("Could not parse %r: %s", url, exc)
        return None

    if selected is None:
        return parts
    return parts.get(selected.value)

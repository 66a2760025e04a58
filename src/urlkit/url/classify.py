"""src/urlkit/url/classify.py

Absolute/relative/local checks and absolutization.
"""

from urlkit.exceptions import InvalidArgumentError
from urlkit.url.builder import build
from urlkit.url.components import Component
from urlkit.url.parser import parse

__all__ = ["absolutize_url", "is_absolute", "is_relative", "is_local"]


def absolutize_url(url: str, base_url: str) -> str:
    """
    Force the scheme and host of ``base_url`` onto ``url``.

    Everything else in ``url`` (path, query, port, ...) is kept as is;
    relative paths are not merged with the base path.

    Raises:
        InvalidArgumentError: If ``base_url`` lacks a scheme or a host.
    """
    components = parse(base_url) or {}
    scheme = components.get(Component.SCHEME.value)
    host = components.get(Component.HOST.value)
    if not scheme or not host:
        raise InvalidArgumentError(f"Malformed baseUrl: {base_url}")

    return build(url, {"s": scheme, "h": host})


def is_absolute(url: str) -> bool:
    """Check if url is absolute (it has both a scheme and a host)."""
    components = parse(url)
    if not isinstance(components, dict):
        return False
    return Component.SCHEME.value in components and Component.HOST.value in components


def is_relative(url: str) -> bool:
    """Check if url is relative, i.e. not absolute."""
    return not is_absolute(url)


def is_local(url: str) -> bool:
    """
    Check if url is a local file path.

    True when the scheme is missing or ``file`` and there is no host.
    Unparseable input is not local.
    """
    components = parse(url)
    if not isinstance(components, dict):
        return False

    scheme = components.get(Component.SCHEME.value)
    if scheme is not None and scheme != "file":
        return False

    return Component.HOST.value not in components

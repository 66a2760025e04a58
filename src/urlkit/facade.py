"""src/urlkit/facade.py

``Url``: every Urlkit operation behind one class, for callers that prefer
``Url.build(...)`` over importing the functions one by one.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from urlkit.url.builder import BuildFlag, build
from urlkit.url.classify import absolutize_url, is_absolute, is_local, is_relative
from urlkit.url.components import Component, URLComponents
from urlkit.url.parser import parse
from urlkit.url.query import (
    QueryEncoding,
    build_query_string,
    parse_query_string,
    parse_query_string_from_url,
)

__all__ = ["Url"]


class Url:
    """Namespace of static URL helpers; never instantiated."""

    __slots__ = ()

    SCHEME = Component.SCHEME
    HOST = Component.HOST
    PORT = Component.PORT
    USER = Component.USER
    PASS = Component.PASS
    PATH = Component.PATH
    QUERY = Component.QUERY
    FRAGMENT = Component.FRAGMENT

    @staticmethod
    def build(
        base: Union[str, Mapping[str, Any], None],
        replacement: Optional[Mapping[str, Any]] = None,
        flags: BuildFlag = BuildFlag.REPLACE,
    ) -> str:
        """Build an URL from a base and replacement parts."""
        return build(base, replacement, flags)

    @staticmethod
    def parse(
        url: str, component: Optional[Any] = None
    ) -> Union[URLComponents, str, int, None]:
        """Parse an URL, returning every component or just one."""
        return parse(url, component)

    @staticmethod
    def build_query_string(
        params: Union[Mapping[Any, Any], List[Any], Tuple[Any, ...]],
        prefix: Optional[str] = None,
        separator: str = "&",
        encoding: QueryEncoding = QueryEncoding.RFC1738,
    ) -> str:
        """Generate a URL-encoded query string."""
        return build_query_string(params, prefix, separator, encoding)

    @staticmethod
    def parse_query_string(
        query: str,
        limits: Optional[Dict[str, int]] = None,
        separator: str = "&",
    ) -> Dict[str, Any]:
        """Parse a query string into a dict."""
        return parse_query_string(query, limits=limits, separator=separator)

    @staticmethod
    def parse_query_string_from_url(
        url: str, limits: Optional[Dict[str, int]] = None
    ) -> Dict[str, Any]:
        """Parse URL and return its query string as a dict."""
        return parse_query_string_from_url(url, limits=limits)

    @staticmethod
    def absolutize_url(url: str, base_url: str) -> str:
        """Set scheme and host of ``url`` from ``base_url``."""
        return absolutize_url(url, base_url)

    @staticmethod
    def is_absolute(url: str) -> bool:
        """Check if url is absolute (based on scheme and host components)."""
        return is_absolute(url)

    @staticmethod
    def is_relative(url: str) -> bool:
        """Check if url is relative."""
        return is_relative(url)

    @staticmethod
    def is_local(url: str) -> bool:
        """Check if url is a local file path."""
        return is_local(url)

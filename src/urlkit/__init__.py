"""src/urlkit/__init__.py

Urlkit - Small, stateless helpers for building, parsing and classifying URLs.

Urlkit is built entirely on Python's standard library. Every function is a
pure transformation over URL strings and component dicts: no I/O, no shared
state, safe to call from any thread.

Key Features:
    - Build URLs from a base plus replacement parts (``s``/``h`` aliases)
    - RFC 3986 component splitting with IPv6 host support
    - Form-encoded query strings with bracketed nesting
    - Absolute / relative / local classification
    - Signed links
    - Full type hints (PEP 561)

Example:
    Building and parsing::

        from urlkit import Url

        Url.build('/mingalevme/phputils-url', {'s': 'https', 'h': 'github.com'})
        # 'https://github.com/mingalevme/phputils-url'

        Url.parse('https://github.com:443/x', Url.PORT)
        # 443

    Query strings::

        from urlkit import build_query_string, parse_query_string

        build_query_string({'a': {'b': 1}, 'c': ['x', 'y']})
        # 'a%5Bb%5D=1&c%5B0%5D=x&c%5B1%5D=y'

        parse_query_string('foo=bar&bar=foo')
        # {'foo': 'bar', 'bar': 'foo'}
"""

from urlkit.exceptions import (
    InvalidArgumentError,
    InvalidInputError,
    UnknownComponentError,
    UnparseableUrlError,
    UrlkitError,
)
from urlkit.facade import Url
from urlkit.url.builder import BuildFlag, build, compose
from urlkit.url.classify import absolutize_url, is_absolute, is_local, is_relative
from urlkit.url.components import Component
from urlkit.url.parser import parse
from urlkit.url.query import (
    QueryEncoding,
    build_query_string,
    parse_query_string,
    parse_query_string_from_url,
)
from urlkit.url.secure_link import SecureLink
from urlkit.version import __version__

__all__ = [
    "Url",
    "Component",
    "BuildFlag",
    "QueryEncoding",
    "SecureLink",
    "build",
    "compose",
    "parse",
    "build_query_string",
    "parse_query_string",
    "parse_query_string_from_url",
    "absolutize_url",
    "is_absolute",
    "is_relative",
    "is_local",
    "UrlkitError",
    "InvalidInputError",
    "UnknownComponentError",
    "InvalidArgumentError",
    "UnparseableUrlError",
]

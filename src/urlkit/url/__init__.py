"""src/urlkit/url/__init__.py"""

from .builder import BuildFlag, build, compose
from .classify import absolutize_url, is_absolute, is_local, is_relative
from .components import ALIASES, COMPONENTS, Component, URLComponents
from .parser import parse, split_url
from .query import (
    QueryEncoding,
    build_query_string,
    parse_query_string,
    parse_query_string_from_url,
)
from .secure_link import SecureLink

__all__ = [
    "ALIASES",
    "COMPONENTS",
    "BuildFlag",
    "Component",
    "QueryEncoding",
    "SecureLink",
    "URLComponents",
    "absolutize_url",
    "build",
    "build_query_string",
    "compose",
    "is_absolute",
    "is_local",
    "is_relative",
    "parse",
    "parse_query_string",
    "parse_query_string_from_url",
    "split_url",
]

"""src/urlkit/url/builder.py

URL builder for Urlkit.
"""

import logging
from enum import IntFlag
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import urljoin

from urlkit.exceptions import InvalidArgumentError, InvalidInputError
from urlkit.url.components import Component, URLComponents, resolve_component
from urlkit.url.parser import split_url
from urlkit.url.query import build_query_string, parse_query_string
from urlkit.utils.validators import validate_port, validate_scheme

__all__ = ["BuildFlag", "compose", "build"]

logger = logging.getLogger(__name__)

_SCHEME = Component.SCHEME.value
_HOST = Component.HOST.value
_PORT = Component.PORT.value
_USER = Component.USER.value
_PASS = Component.PASS.value
_PATH = Component.PATH.value
_QUERY = Component.QUERY.value
_FRAGMENT = Component.FRAGMENT.value


class BuildFlag(IntFlag):
    """How replacement parts are combined with the base URL."""

    REPLACE = 0
    JOIN_PATH = 1
    JOIN_QUERY = 2
    STRIP_USER = 4
    STRIP_PASS = 8
    STRIP_AUTH = STRIP_USER | STRIP_PASS
    STRIP_PORT = 32
    STRIP_PATH = 64
    STRIP_QUERY = 128
    STRIP_FRAGMENT = 256
    STRIP_ALL = (
        STRIP_AUTH | STRIP_PORT | STRIP_PATH | STRIP_QUERY | STRIP_FRAGMENT
    )


_STRIPPED = (
    (BuildFlag.STRIP_USER, _USER),
    (BuildFlag.STRIP_PASS, _PASS),
    (BuildFlag.STRIP_PORT, _PORT),
    (BuildFlag.STRIP_PATH, _PATH),
    (BuildFlag.STRIP_QUERY, _QUERY),
    (BuildFlag.STRIP_FRAGMENT, _FRAGMENT),
)


def _normalize(parts: Mapping[Any, Any], *, aliases: bool) -> URLComponents:
    normalized: URLComponents = {}
    for key, value in parts.items():
        name = resolve_component(key, aliases=aliases).value
        if value is None:
            continue
        if name == _PORT:
            port = validate_port(value)
            if port is None:
                raise InvalidArgumentError(f"Invalid port: {value!r}")
            normalized[name] = port
        elif name == _SCHEME and not validate_scheme(str(value)):
            raise InvalidArgumentError(f"Invalid scheme: {value!r}")
        else:
            normalized[name] = str(value)
    return normalized


def _base_parts(base: Any) -> URLComponents:
    if not base:
        return {}
    if isinstance(base, str):
        return split_url(base)
    if isinstance(base, Mapping):
        return _normalize(base, aliases=False)
    raise InvalidInputError(
        f"Expected a URL string or a component mapping, got {type(base).__name__}"
    )


def _join_path(base_path: str, path: str, has_authority: bool) -> str:
    if has_authority and not base_path.startswith("/"):
        base_path = f"/{base_path}"
    # A colon in the first segment would be read as a scheme
    if ":" in path.split("/", 1)[0]:
        path = f"./{path}"
    joined = urljoin(base_path, path)
    # urljoin loses the root when ".." climbs above it and there is no netloc
    if base_path.startswith("/") and not joined.startswith("/"):
        joined = f"/{joined}"
    return joined


def _merge_params(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            target[key] = _merge_params(current, value)
        else:
            target[key] = value
    return target


def _unparse(parts: URLComponents) -> Tuple[str, URLComponents]:
    url = ""
    scheme = parts.get(_SCHEME)
    if scheme is not None:
        url += f"{scheme}:"

    if _HOST not in parts:
        for name in (_USER, _PASS, _PORT):
            if parts.pop(name, None) is not None:
                logger.debug("Dropping %s: the URL has no host", name)
    elif _USER not in parts:
        parts.pop(_PASS, None)

    path = str(parts.get(_PATH, ""))
    has_authority = _HOST in parts or str(scheme).lower() == "file"
    if has_authority:
        url += "//"
        if _USER in parts:
            url += str(parts[_USER])
            if _PASS in parts:
                url += f":{parts[_PASS]}"
            url += "@"
        url += str(parts.get(_HOST, ""))
        if _PORT in parts:
            url += f":{parts[_PORT]}"
        if path and not path.startswith("/"):
            path = f"/{path}"
    elif path.startswith("//"):
        # Empty authority, so the path is not read back as a host
        url += "//"
    elif scheme is None and ":" in path.split("/", 1)[0]:
        path = f"./{path}"

    if path:
        parts[_PATH] = path
        url += path
    if _QUERY in parts:
        url += f"?{parts[_QUERY]}"
    if _FRAGMENT in parts:
        url += f"#{parts[_FRAGMENT]}"
    return url, parts


def compose(
    base: Union[str, Mapping[str, Any], None],
    replacement: Optional[Mapping[str, Any]] = None,
    flags: BuildFlag = BuildFlag.REPLACE,
) -> Tuple[str, URLComponents]:
    """
    Build a URL and return it together with its components.

    Args:
        base: Base URL or its parts (no aliases). Any falsy value builds
            from scratch.
        replacement: Parts overriding those of ``base``. Accepts the
            aliases ``s`` (scheme) and ``h`` (host) besides full names.
        flags: ``BuildFlag`` combination controlling joins and strips.

    Returns:
        Tuple of the URL string and the parts it was built from.

    Raises:
        InvalidInputError: If ``base`` is neither a string nor a mapping.
        UnknownComponentError: If a part name is not recognized.
        InvalidArgumentError: If a port is not an integer in 0-65535.
        UnparseableUrlError: If ``base`` is a string that cannot be parsed.
    """
    parts = _base_parts(base)
    new = _normalize(replacement, aliases=True) if replacement else {}

    if flags & BuildFlag.JOIN_PATH and _PATH in new and _PATH in parts:
        has_authority = _HOST in parts or _HOST in new
        new[_PATH] = _join_path(str(parts[_PATH]), str(new[_PATH]), has_authority)

    if flags & BuildFlag.JOIN_QUERY and _QUERY in new and _QUERY in parts:
        merged = _merge_params(
            parse_query_string(str(parts[_QUERY])),
            parse_query_string(str(new[_QUERY])),
        )
        new[_QUERY] = build_query_string(merged)

    parts.update(new)

    for flag, name in _STRIPPED:
        if flags & flag:
            parts.pop(name, None)

    return _unparse(parts)


def build(
    base: Union[str, Mapping[str, Any], None],
    replacement: Optional[Mapping[str, Any]] = None,
    flags: BuildFlag = BuildFlag.REPLACE,
) -> str:
    """
    Build a URL from a base and replacement parts.

    See :func:`compose` for the arguments; only the URL string is returned.
    """
    url, _ = compose(base, replacement, flags)
    return url

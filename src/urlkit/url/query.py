"""src/urlkit/url/query.py

Form-encoded query string building and parsing.
"""

import logging
import re
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote, quote_plus, unquote_plus

from urlkit.exceptions import InvalidArgumentError, InvalidInputError
from urlkit.url.components import Component
from urlkit.url.parser import parse
from urlkit.utils.limits import QueryLimits

__all__ = [
    "QueryEncoding",
    "build_query_string",
    "parse_query_string",
    "parse_query_string_from_url",
]

logger = logging.getLogger(__name__)

QueryParams = Dict[str, Any]


class QueryEncoding(Enum):
    """Percent-encoding flavour for query strings."""

    RFC1738 = "rfc1738"  # application/x-www-form-urlencoded, space as "+"
    RFC3986 = "rfc3986"  # space as "%20"


def _quoter(encoding: QueryEncoding) -> Callable[[str], str]:
    if encoding is QueryEncoding.RFC3986:
        return lambda value: quote(value, safe="")
    return lambda value: quote_plus(value, safe="")


def _items(data: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(data, Mapping):
        return data.items()
    if isinstance(data, (list, tuple)):
        return enumerate(data)
    raise InvalidInputError(
        f"Expected a mapping or a sequence, got {type(data).__name__}"
    )


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def _flatten(
    name: str, value: Any, pairs: List[str], quoter: Callable[[str], str]
) -> None:
    if value is None:
        return
    if isinstance(value, (Mapping, list, tuple)):
        for key, item in _items(value):
            _flatten(f"{name}%5B{quoter(str(key))}%5D", item, pairs, quoter)
        return
    pairs.append(f"{name}={quoter(_scalar(value))}")


def build_query_string(
    params: Union[Mapping[Any, Any], List[Any], Tuple[Any, ...]],
    prefix: Optional[str] = None,
    separator: str = "&",
    encoding: QueryEncoding = QueryEncoding.RFC1738,
) -> str:
    """
    Generate a URL-encoded query string.

    Nested mappings and sequences become bracketed keys, so
    ``{"a": {"b": 1}, "c": ["x", "y"]}`` gives ``a[b]=1&c[0]=x&c[1]=y``
    (brackets percent-encoded). ``None`` values are skipped and booleans
    serialize as ``1``/``0``.

    Args:
        params: Mapping (or sequence) of parameters.
        prefix: Prepended to integer keys of ``params`` itself, to keep
            the output parseable as named variables.
        separator: String placed between pairs.
        encoding: ``QueryEncoding.RFC1738`` encodes spaces as ``+``,
            ``QueryEncoding.RFC3986`` as ``%20``.

    Returns:
        The encoded query string, without a leading ``?``.

    Raises:
        InvalidInputError: If ``params`` is neither a mapping nor a sequence.
    """
    quoter = _quoter(encoding)
    pairs: List[str] = []
    for key, value in _items(params):
        name = str(key)
        if prefix is not None and isinstance(key, int) and not isinstance(key, bool):
            name = f"{prefix}{key}"
        _flatten(quoter(name), value, pairs, quoter)
    return separator.join(pairs)


def _split_key(key: str, max_depth: int) -> Optional[List[str]]:
    """Split ``a[b][]`` into ``["a", "b", ""]``; None if the key is unusable."""
    key = key.lstrip(" ")
    bracket = key.find("[")
    if bracket == 0:
        return None
    if bracket == -1:
        return [key] if key else None

    path = [key[:bracket]]
    rest = key[bracket:]
    while rest.startswith("["):
        end = rest.find("]")
        if end == -1:
            if len(path) == 1:
                path[0] += rest
            break
        if len(path) > max_depth:
            logger.warning(
                "Query key %r nests deeper than %d levels; dropped", key, max_depth
            )
            return None
        path.append(rest[1:end])
        rest = rest[end + 1 :]
    return path


def _next_index(node: Dict[str, Any]) -> str:
    indexes = [int(k) for k in node if k.isascii() and k.isdigit()]
    return str(max(indexes) + 1) if indexes else "0"


def _assign(root: Dict[str, Any], path: List[str], value: str) -> None:
    node = root
    *parents, last = path
    for segment in parents:
        if segment == "":
            segment = _next_index(node)
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    if last == "":
        last = _next_index(node)
    node[last] = value


def _listify(node: Dict[str, Any]) -> Union[Dict[str, Any], List[Any]]:
    for key, value in node.items():
        if isinstance(value, dict):
            node[key] = _listify(value)
    if list(node) == [str(i) for i in range(len(node))]:
        return list(node.values())
    return node


def parse_query_string(
    query: str,
    limits: Optional[Dict[str, int]] = None,
    separator: str = "&",
) -> QueryParams:
    """
    Parse a query string into a (possibly nested) dict.

    ``a[b]=1`` builds nested dicts, ``a[]=x&a[]=y`` appends, and nested
    dicts keyed exactly ``"0"`` .. ``"n-1"`` come back as lists. A plain
    key given twice keeps its last value; a pair without ``=`` gets ``""``.

    Args:
        query: Query string, without the leading ``?``.
        limits: Optional ``max_depth``/``max_vars`` overrides.
        separator: Every character of it separates pairs.

    Returns:
        Ordered dict of parameters.

    Raises:
        InvalidArgumentError: If ``separator`` is empty.
    """
    if not separator:
        raise InvalidArgumentError("Query separator must not be empty")

    result: QueryParams = {}
    if not query:
        return result

    cfg = QueryLimits.from_dict(limits)
    count = 0
    for pair in re.split(f"[{re.escape(separator)}]", query):
        if not pair:
            continue
        if count >= cfg.max_vars:
            logger.warning(
                "Query string has more than %d variables; the rest are dropped",
                cfg.max_vars,
            )
            break
        count += 1
        raw_key, _, raw_value = pair.partition("=")
        path = _split_key(unquote_plus(raw_key), cfg.max_depth)
        if path is None:
            continue
        _assign(result, path, unquote_plus(raw_value))

    for key, value in result.items():
        if isinstance(value, dict):
            result[key] = _listify(value)
    return result


def parse_query_string_from_url(
    url: str, limits: Optional[Dict[str, int]] = None
) -> QueryParams:
    """Parse the query component of ``url``; ``{}`` when it has none."""
    query = parse(url, Component.QUERY)
    return parse_query_string(query if isinstance(query, str) else "", limits=limits)

"""src/urlkit/url/components.py

Component names recognized by the parser and the builder.
"""

from enum import Enum
from typing import Any, Dict, Tuple, Union

from urlkit.exceptions import UnknownComponentError

__all__ = [
    "Component",
    "COMPONENTS",
    "ALIASES",
    "URLComponents",
    "resolve_component",
]

URLComponents = Dict[str, Union[str, int]]


class Component(str, Enum):
    """Named parts of a URL."""

    SCHEME = "scheme"
    HOST = "host"
    PORT = "port"
    USER = "user"
    PASS = "pass"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"


# Serialization order
COMPONENTS: Tuple[Component, ...] = (
    Component.SCHEME,
    Component.USER,
    Component.PASS,
    Component.HOST,
    Component.PORT,
    Component.PATH,
    Component.QUERY,
    Component.FRAGMENT,
)

ALIASES: Dict[str, Component] = {
    "s": Component.SCHEME,
    "h": Component.HOST,
}


def resolve_component(name: Any, *, aliases: bool = False) -> Component:
    """
    Map a component name to its ``Component`` member.

    Args:
        name: A ``Component`` member or its string value.
        aliases: Also accept the short replacement aliases (``s``, ``h``).

    Returns:
        The matching ``Component``.

    Raises:
        UnknownComponentError: If ``name`` is not recognized.
    """
    if isinstance(name, Component):
        return name
    if isinstance(name, str):
        if aliases and name in ALIASES:
            return ALIASES[name]
        try:
            return Component(name)
        except ValueError:
            pass
    raise UnknownComponentError(name)

"""src/urlkit/exceptions.py

Urlkit Exceptions hierarchy.
"""

from typing import Any


class UrlkitError(Exception):
    """Base exception for all Urlkit errors."""


class InvalidInputError(UrlkitError):
    """A base URL is neither a URL string nor a component mapping."""


class UnknownComponentError(UrlkitError):
    """
    A component name outside the recognized set was given.
    The offending name is kept in ``component``.
    """

    def __init__(self, component: Any):
        self.component = component
        super().__init__(f"Unknown component: {component}")


class InvalidArgumentError(UrlkitError):
    """An argument has the right type but an unusable value."""


class UnparseableUrlError(UrlkitError):
    """
    The URL is too malformed to extract any component.
    """

    def __init__(self, message: str = "URL could not be parsed"):
        super().__init__(message)

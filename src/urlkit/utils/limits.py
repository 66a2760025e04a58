"""utils/limits.py

Query string parsing limits.
"""

from dataclasses import dataclass
from typing import Dict, Optional

DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_VARS = 1000


@dataclass
class QueryLimits:
    """
    Limits applied while parsing a query string.

    Attributes:
        max_depth: Maximum number of bracket levels in a single key.
        max_vars: Maximum number of key/value pairs read from one query.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_vars: int = DEFAULT_MAX_VARS

    @classmethod
    def from_dict(cls, limits: Optional[Dict[str, int]]) -> "QueryLimits":
        """Create a QueryLimits instance from a dict, falling back to defaults."""
        if not limits:
            return cls()
        return cls(
            max_depth=limits.get("max_depth", DEFAULT_MAX_DEPTH),
            max_vars=limits.get("max_vars", DEFAULT_MAX_VARS),
        )

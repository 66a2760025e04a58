"""src/urlkit/url/secure_link.py

Signed links: a keyed signature carried as a query parameter.
"""

import base64
import hashlib
import hmac
from typing import Optional, Tuple
from urllib.parse import unquote_plus

from urlkit.url.builder import compose
from urlkit.url.components import Component, URLComponents
from urlkit.url.query import build_query_string

__all__ = ["SecureLink"]

_QUERY = Component.QUERY.value
_FRAGMENT = Component.FRAGMENT.value


class SecureLink:
    """
    Sign URLs with a shared secret and verify them later.

    The signature is an HMAC-MD5 of the unsigned URL (fragment excluded),
    URL-safe base64 encoded and appended as the ``param`` query parameter.
    The rest of the query is left byte for byte as it was.
    """

    __slots__ = ("_secret", "param")

    def __init__(self, secret: str, param: str = "signature"):
        self._secret = secret.encode("utf-8")
        self.param = param

    def _digest(self, parts: URLComponents) -> str:
        unsigned = {k: v for k, v in parts.items() if k != _FRAGMENT}
        url, _ = compose(unsigned)
        mac = hmac.new(self._secret, url.encode("utf-8"), hashlib.md5).digest()
        return base64.urlsafe_b64encode(mac).decode("ascii")

    def _strip_signature(self, url: str) -> Tuple[URLComponents, Optional[str]]:
        """Remove every signature pair from the query; return the parts and the last value."""
        _, parts = compose(url)
        query = parts.get(_QUERY)
        if query is None:
            return parts, None

        signature = None
        kept = []
        for pair in str(query).split("&"):
            key, _, value = pair.partition("=")
            if unquote_plus(key) == self.param:
                signature = unquote_plus(value)
            else:
                kept.append(pair)
        if any(kept):
            parts[_QUERY] = "&".join(kept)
        else:
            parts.pop(_QUERY)
        return parts, signature

    def sign(self, url: str) -> str:
        """
        Sign a URL.

        Args:
            url: URL to sign. An existing signature parameter is replaced.

        Returns:
            The URL with the signature parameter appended to its query.
        """
        parts, _ = self._strip_signature(url)
        pair = build_query_string({self.param: self._digest(parts)})
        query = parts.get(_QUERY)
        parts[_QUERY] = f"{query}&{pair}" if query else pair
        signed, _ = compose(parts)
        return signed

    def verify(self, url: str) -> bool:
        """Check the signature carried by ``url``."""
        parts, signature = self._strip_signature(url)
        if signature is None:
            return False
        expected = self._digest(parts)
        return hmac.compare_digest(signature.encode("utf-8"), expected.encode("ascii"))

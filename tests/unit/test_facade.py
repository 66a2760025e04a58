"""tests/unit/test_facade.py

Unit tests for the Url facade class.

Test Coverage:
    - Component constants
    - Delegation of every static helper
"""

import pytest

from urlkit import Url
from urlkit.exceptions import InvalidArgumentError, UnknownComponentError
from urlkit.url.components import Component


class TestUrlConstants:
    """Tests for the component constants exposed on Url."""

    def test_constants(self):
        """Test that every component is reachable from Url."""
        assert Url.SCHEME is Component.SCHEME
        assert Url.HOST is Component.HOST
        assert Url.PORT is Component.PORT
        assert Url.USER is Component.USER
        assert Url.PASS is Component.PASS
        assert Url.PATH is Component.PATH
        assert Url.QUERY is Component.QUERY
        assert Url.FRAGMENT is Component.FRAGMENT


class TestUrlHelpers:
    """Tests for the static helpers on Url."""

    def test_build(self):
        """Test Url.build()."""
        assert (
            Url.build("/mingalevme/phputils-url", {"s": "https", "h": "github.com"})
            == "https://github.com/mingalevme/phputils-url"
        )

    def test_parse(self):
        """Test Url.parse() with and without a selector."""
        assert Url.parse("https://github.com:443/x", Url.PORT) == 443
        assert Url.parse("/x") == {"path": "/x"}
        with pytest.raises(UnknownComponentError):
            Url.parse("/x", "nope")

    def test_query_strings(self):
        """Test the query string helpers."""
        assert Url.build_query_string({"foo": "bar", "bar": "foo"}) == "foo=bar&bar=foo"
        assert Url.parse_query_string("foo=bar&bar=foo") == {
            "foo": "bar",
            "bar": "foo",
        }
        assert Url.parse_query_string("a=1;b=2", separator=";") == {
            "a": "1",
            "b": "2",
        }
        assert Url.parse_query_string_from_url("http://example.com") == {}
        assert Url.parse_query_string_from_url(
            "http://example.com?foo=bar&bar=foo"
        ) == {"foo": "bar", "bar": "foo"}

    def test_absolutize_url(self):
        """Test Url.absolutize_url()."""
        assert (
            Url.absolutize_url("/mingalevme/phputils-url", "https://github.com")
            == "https://github.com/mingalevme/phputils-url"
        )
        with pytest.raises(InvalidArgumentError):
            Url.absolutize_url("/mingalevme/phputils-url", "/mingalevme")

    def test_classification(self):
        """Test the classification helpers."""
        assert Url.is_absolute("https://github.com/mingalevme/phputils-url")
        assert Url.is_relative("//github.com/mingalevme/phputils-url")
        assert Url.is_local("file:///mingalevme/phputils-url")
        assert not Url.is_local("//github.com/mingalevme/phputils-url")

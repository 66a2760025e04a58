"""Unit tests for urlkit.url.parser module."""

import logging

import pytest

from urlkit.exceptions import UnknownComponentError, UnparseableUrlError
from urlkit.url.components import Component
from urlkit.url.parser import parse, split_url


class TestSplitUrl:
    """Tests for split_url()."""

    def test_all_components(self, full_url, full_components):
        """Test splitting a URL that carries every component."""
        assert split_url(full_url) == full_components

    def test_port_is_int(self, full_url):
        """Test that the port comes back as an integer."""
        assert split_url(full_url)["port"] == 8080

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("http://example.com", {"scheme": "http", "host": "example.com"}),
            ("//github.com/x", {"host": "github.com", "path": "/x"}),
            ("/x", {"path": "/x"}),
            ("x/y", {"path": "x/y"}),
            ("file:///path", {"scheme": "file", "path": "/path"}),
            (
                "mailto:joe@example.com",
                {"scheme": "mailto", "path": "joe@example.com"},
            ),
            ("?a=1", {"query": "a=1"}),
            ("#top", {"fragment": "top"}),
            (
                "http://example.com?",
                {"scheme": "http", "host": "example.com", "query": ""},
            ),
            (
                "http://example.com/#",
                {"scheme": "http", "host": "example.com", "path": "/", "fragment": ""},
            ),
            ("", {"path": ""}),
        ],
    )
    def test_present_components_only(self, url, expected):
        """Test that only components occurring in the URL are returned."""
        assert split_url(url) == expected

    def test_ipv6_host_with_port(self):
        """Test that the port is split after the closing bracket."""
        assert split_url("http://[::1]:8080/") == {
            "scheme": "http",
            "host": "[::1]",
            "port": 8080,
            "path": "/",
        }

    def test_ipv6_host_without_port(self):
        """Test that colons inside brackets are not taken as a port."""
        parts = split_url("http://[2001:db8::7]/c=GB")
        assert parts["host"] == "[2001:db8::7]"
        assert "port" not in parts

    def test_user_without_password(self):
        """Test userinfo without a colon."""
        parts = split_url("ftp://anonymous@ftp.example.com/")
        assert parts["user"] == "anonymous"
        assert "pass" not in parts

    def test_userinfo_split_at_last_at(self):
        """Test that an '@' inside the password stays in the password."""
        parts = split_url("http://me:p@ss@example.com/")
        assert parts["user"] == "me"
        assert parts["pass"] == "p@ss"
        assert parts["host"] == "example.com"

    def test_empty_port_is_absent(self):
        """Test that 'host:' does not produce a port."""
        assert split_url("http://example.com:/p") == {
            "scheme": "http",
            "host": "example.com",
            "path": "/p",
        }

    def test_host_case_preserved(self):
        """Test that the host is not lowercased."""
        assert split_url("http://Example.COM/")["host"] == "Example.COM"

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com:99999/",
            "http://example.com:8o/",
            "http://[::1/",
            "http://[::1]x/",
            "http://ex]ample.com/",
            "http://@/x",
            "http://:80/",
        ],
    )
    def test_unparseable(self, url):
        """Test that malformed authorities are rejected."""
        with pytest.raises(UnparseableUrlError):
            split_url(url)

    def test_non_string(self):
        """Test that non-string input is rejected."""
        with pytest.raises(UnparseableUrlError):
            split_url(42)


class TestParse:
    """Tests for parse()."""

    def test_full_mapping(self, full_url, full_components):
        """Test parse() without a selector."""
        assert parse(full_url) == full_components

    @pytest.mark.parametrize(
        "component, expected",
        [
            (Component.SCHEME, "https"),
            (Component.HOST, "example.com"),
            (Component.PORT, 8080),
            (Component.USER, "user"),
            (Component.PASS, "secret"),
            (Component.PATH, "/some/path"),
            (Component.QUERY, "foo=bar&baz=1"),
            (Component.FRAGMENT, "section"),
            ("host", "example.com"),
            ("port", 8080),
        ],
    )
    def test_single_component(self, full_url, component, expected):
        """Test selecting a single component by member or name."""
        assert parse(full_url, component) == expected

    def test_missing_component_is_none(self):
        """Test that an absent component gives None."""
        assert parse("/x", Component.FRAGMENT) is None
        assert parse("http://example.com", "port") is None

    @pytest.mark.parametrize("component", ["password", "PORT", 0, 5, ""])
    def test_unknown_component(self, component):
        """Test that selectors outside the eight names are rejected."""
        with pytest.raises(UnknownComponentError):
            parse("http://example.com", component)

    def test_unknown_component_checked_before_parsing(self):
        """Test that the selector is validated even for broken URLs."""
        with pytest.raises(UnknownComponentError):
            parse("http://:80/", "nope")

    def test_unparseable_returns_none(self, caplog):
        """Test that parse() reports unparseable URLs as None."""
        with caplog.at_level(logging.DEBUG, logger="urlkit.url.parser"):
            assert parse("http://example.com:abc/") is None
        assert "Could not parse" in caplog.text

    def test_unparseable_with_selector_returns_none(self):
        """Test that a selector on an unparseable URL gives None."""
        assert parse("http://example.com:abc/", Component.HOST) is None

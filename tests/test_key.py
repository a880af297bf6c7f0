"""Tests for short keys."""

import pytest

from quicklink.exceptions import InvalidInputError
from quicklink.key import DEFAULT_KEY_LENGTH, URL_SAFE_CHARS, InMemoryUrlKey


class TestInMemoryUrlKey:
    """Test key construction, comparison and rendering."""

    def test_from_url(self):
        """The key is the last path segment."""
        key = InMemoryUrlKey.from_url("https://example.com/abc")
        assert key.token == "abc"

    def test_from_url_nested_path(self):
        """Only the segment after the last slash is used."""
        key = InMemoryUrlKey.from_url("short.ly:8080/x/y/aB3_x")
        assert key.token == "aB3_x"

    def test_from_url_without_slash(self):
        """A URL without '/' is rejected."""
        with pytest.raises(InvalidInputError, match="no-slash-here"):
            InMemoryUrlKey.from_url("no-slash-here")

    def test_invalid_input_is_value_error(self):
        """InvalidInputError can be caught as ValueError."""
        with pytest.raises(ValueError):
            InMemoryUrlKey.from_url("")

    def test_from_url_trailing_slash(self):
        """A trailing slash yields an empty token rather than an error."""
        key = InMemoryUrlKey.from_url("https://example.com/")
        assert key.token == ""

    def test_from_id_accepts_anything(self):
        """from_id never validates."""
        assert InMemoryUrlKey.from_id("zzzzz").token == "zzzzz"
        assert InMemoryUrlKey.from_id("not a valid token!").token == "not a valid token!"

    def test_generate_random(self):
        """Random keys use the URL-safe alphabet at the default length."""
        key = InMemoryUrlKey.generate_random()
        assert len(key.token) == DEFAULT_KEY_LENGTH == 5
        assert all(c in URL_SAFE_CHARS for c in key.token)
        assert InMemoryUrlKey.is_valid_format(key.token)

    def test_generate_random_custom_length(self):
        """Random key with custom length."""
        key = InMemoryUrlKey.generate_random(length=12)
        assert len(key.token) == 12

    def test_equality_and_hash(self):
        """Keys are equal iff their tokens are equal."""
        a = InMemoryUrlKey.from_id("abc12")
        b = InMemoryUrlKey.from_url("https://short.ly/abc12")
        c = InMemoryUrlKey.from_id("abc13")

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2
        assert a != "abc12"

    def test_immutable(self):
        """Keys cannot be modified after creation."""
        key = InMemoryUrlKey.from_id("abc12")
        with pytest.raises(AttributeError):
            key.token = "other"
        with pytest.raises(AttributeError):
            key._token = "other"

    def test_build_url(self):
        """Short link is '{host}/{token}'."""
        key = InMemoryUrlKey.from_id("abc12")
        assert key.build_url("short.ly") == "short.ly/abc12"
        assert key.build_url("localhost:8080") == "localhost:8080/abc12"

    def test_str(self):
        """str() gives the bare token."""
        assert str(InMemoryUrlKey.from_id("abc12")) == "abc12"

    def test_is_valid_format(self):
        """Format validation."""
        assert InMemoryUrlKey.is_valid_format("aB3_x")
        assert InMemoryUrlKey.is_valid_format("a-b-c")

        assert not InMemoryUrlKey.is_valid_format("")
        assert not InMemoryUrlKey.is_valid_format("abc 1")
        assert not InMemoryUrlKey.is_valid_format("abc@1")

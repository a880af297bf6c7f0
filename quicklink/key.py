"""Short key types for URL shortener."""

import random
import string
from abc import ABC, abstractmethod

from .exceptions import InvalidInputError


# URL-safe characters (alphanumeric plus '_' and '-', case-sensitive)
URL_SAFE_CHARS = string.ascii_letters + string.digits + "_-"

DEFAULT_KEY_LENGTH = 5

_random = random.SystemRandom()


class UrlKey(ABC):
    """Abstract base class for short keys.

    Concrete key types must be immutable, hashable and compare equal
    when their tokens are equal.
    """

    @classmethod
    @abstractmethod
    def from_url(cls, url: str) -> "UrlKey":
        """Extract a key from a full short URL.

        Args:
            url: Short URL ending in the key token (e.g. short.ly/abc12)

        Returns:
            Key built from the last path segment

        Raises:
            InvalidInputError: If the URL contains no '/'
        """
        pass

    @classmethod
    @abstractmethod
    def from_id(cls, key_id: str) -> "UrlKey":
        """Build a key from a raw path segment.

        Args:
            key_id: Path segment taken from the request

        Returns:
            Key wrapping the segment as-is
        """
        pass

    @classmethod
    @abstractmethod
    def generate_random(cls, length: int = DEFAULT_KEY_LENGTH) -> "UrlKey":
        """Generate a random key.

        Args:
            length: Number of characters in the token

        Returns:
            New random key
        """
        pass

    @property
    @abstractmethod
    def token(self) -> str:
        """Token string carried by the key."""
        pass

    def build_url(self, host: str) -> str:
        """Render the short link for a host.

        Args:
            host: Host the request was addressed to (e.g. short.ly:8080)

        Returns:
            Short URL as '{host}/{token}'
        """
        return f"{host}/{self.token}"

    def __str__(self) -> str:
        return self.token


class InMemoryUrlKey(UrlKey):
    """Key stored by the in-memory shortener."""

    __slots__ = ("_token",)

    def __init__(self, token: str):
        object.__setattr__(self, "_token", token)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def token(self) -> str:
        return self._token

    @classmethod
    def from_url(cls, url: str) -> "InMemoryUrlKey":
        _, sep, tail = url.rpartition("/")
        if not sep:
            raise InvalidInputError(f"Invalid URL : {url}")
        return cls(tail)

    @classmethod
    def from_id(cls, key_id: str) -> "InMemoryUrlKey":
        return cls(key_id)

    @classmethod
    def generate_random(cls, length: int = DEFAULT_KEY_LENGTH) -> "InMemoryUrlKey":
        return cls("".join(_random.choices(URL_SAFE_CHARS, k=length)))

    @staticmethod
    def is_valid_format(token: str) -> bool:
        """Check if a token only uses URL-safe characters.

        Args:
            token: Token to validate

        Returns:
            True if valid format
        """
        return bool(token) and all(c in URL_SAFE_CHARS for c in token)

    def __eq__(self, other):
        if not isinstance(other, InMemoryUrlKey):
            return NotImplemented
        return self._token == other._token

    def __hash__(self):
        return hash((InMemoryUrlKey, self._token))

    def __repr__(self):
        return f"InMemoryUrlKey({self._token!r})"

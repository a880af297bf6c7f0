"""Shortener engines: bidirectional key/URL storage."""

import threading
from abc import ABC, abstractmethod
from typing import Dict, Type

from .exceptions import KeyGenerationError, NotFoundError
from .key import DEFAULT_KEY_LENGTH, InMemoryUrlKey, UrlKey


class UrlShortener(ABC):
    """Abstract base class for shortener engines.

    Implementations own the key -> URL and URL -> key mappings and must keep
    them mutual inverses.
    """

    key_type: Type[UrlKey] = UrlKey

    @abstractmethod
    def shorten_url(self, url: str) -> UrlKey:
        """Register a URL and return its key.

        Shortening is idempotent: a URL seen before gets its existing key back.

        Args:
            url: The original long URL

        Returns:
            Key registered for the URL

        Raises:
            KeyGenerationError: If no free key could be generated
        """
        pass

    @abstractmethod
    def get_url(self, key: UrlKey) -> str:
        """Get the URL registered under a key.

        Args:
            key: Key to lookup

        Returns:
            The original URL

        Raises:
            NotFoundError: If the key is not registered
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of registered URLs."""
        pass


class InMemoryUrlShortener(UrlShortener):
    """Process-local shortener backed by two dictionaries.

    Every call holds a single lock, so an observer never sees one map
    updated without the other.
    """

    key_type = InMemoryUrlKey

    def __init__(
        self,
        key_length: int = DEFAULT_KEY_LENGTH,
        max_collision_retries: int = 5,
    ):
        """Initialize in-memory shortener.

        Args:
            key_length: Length of generated key tokens
            max_collision_retries: Extra attempts when a generated key is taken
        """
        if key_length < 1:
            raise ValueError(f"key_length must be positive (given value: {key_length})")
        if max_collision_retries < 0:
            raise ValueError(
                f"max_collision_retries must be non-negative (given value: {max_collision_retries})"
            )
        self.key_length = key_length
        self.max_collision_retries = max_collision_retries
        self._keys_to_urls: Dict[InMemoryUrlKey, str] = {}
        self._urls_to_keys: Dict[str, InMemoryUrlKey] = {}
        self._lock = threading.Lock()

    def shorten_url(self, url: str) -> InMemoryUrlKey:
        with self._lock:
            key = self._urls_to_keys.get(url)
            if key is not None:
                return key

            key = self._generate_unique_key()
            self._keys_to_urls[key] = url
            self._urls_to_keys[url] = key
            return key

    def get_url(self, key: UrlKey) -> str:
        with self._lock:
            try:
                return self._keys_to_urls[key]
            except KeyError:
                raise NotFoundError(key) from None

    def count(self) -> int:
        with self._lock:
            return len(self._keys_to_urls)

    def _generate_unique_key(self) -> InMemoryUrlKey:
        # Caller holds the lock.
        for _ in range(self.max_collision_retries + 1):
            key = self.key_type.generate_random(self.key_length)
            if key not in self._keys_to_urls:
                return key

        raise KeyGenerationError(
            f"Unable to generate unique key after {self.max_collision_retries + 1} attempts"
        )

"""Service facade for URL shortener."""

import logging
from typing import Any, Dict, Optional

from .engine import InMemoryUrlShortener, UrlShortener
from .key import UrlKey


class UrlService(UrlShortener):
    """Facade over a shortener engine.

    Implements the same ``UrlShortener`` capability set by delegation, so a
    service can stand in wherever an engine is expected.
    """

    def __init__(
        self,
        shortener: Optional[UrlShortener] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize URL service.

        Args:
            shortener: Engine to delegate to (a fresh in-memory one by default)
            logger: Optional logger
        """
        self.shortener = shortener if shortener is not None else InMemoryUrlShortener()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def key_type(self):
        """Key class used by the underlying engine."""
        return self.shortener.key_type

    @property
    def key_length(self):
        """Token length of the underlying engine, if it has a fixed one."""
        return getattr(self.shortener, "key_length", None)

    def shorten_url(self, url: str) -> UrlKey:
        key = self.shortener.shorten_url(url)
        self.logger.debug(f"Shortened URL: {key} -> {url}")
        return key

    def get_url(self, key: UrlKey) -> str:
        return self.shortener.get_url(key)

    def count(self) -> int:
        return self.shortener.count()

    def shorten(self, url: str, host: str) -> str:
        """Shorten a URL and render the short link.

        Args:
            url: The original long URL
            host: Host the request was addressed to

        Returns:
            Complete short URL (e.g. short.ly/abc12)
        """
        return self.shorten_url(url).build_url(host)

    def resolve(self, path_segment: str) -> str:
        """Resolve a path segment to the original URL.

        Args:
            path_segment: Key token taken from the request path

        Returns:
            Original URL

        Raises:
            NotFoundError: If no URL is registered under the segment
        """
        return self.get_url(self.key_type.from_id(path_segment))

    def expand(self, short_url: str) -> str:
        """Resolve a full short URL to the original URL.

        Args:
            short_url: Short URL as rendered by shorten()

        Returns:
            Original URL

        Raises:
            InvalidInputError: If the short URL has no path segment
            NotFoundError: If the key is not registered
        """
        return self.get_url(self.key_type.from_url(short_url))

    def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics.

        Returns:
            Dictionary with total_urls and key_length
        """
        return {
            "total_urls": self.count(),
            "key_length": self.key_length,
        }

    def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        try:
            self.count()
            storage_healthy = True
        except Exception:
            self.logger.exception("Storage health check failed")
            storage_healthy = False

        return {
            "storage": storage_healthy,
            "overall": storage_healthy,
        }

"""Core business logic for URL shortener."""

from .key import UrlKey, InMemoryUrlKey
from .engine import UrlShortener, InMemoryUrlShortener
from .service import UrlService
from .exceptions import (
    QuickLinkError,
    InvalidInputError,
    NotFoundError,
    KeyGenerationError,
)

__all__ = [
    "UrlKey",
    "InMemoryUrlKey",
    "UrlShortener",
    "InMemoryUrlShortener",
    "UrlService",
    "QuickLinkError",
    "InvalidInputError",
    "NotFoundError",
    "KeyGenerationError",
]

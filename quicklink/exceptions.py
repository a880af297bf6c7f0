"""Exceptions raised by the URL shortener core.

Classes:
    QuickLinkError:
        Generic base class for shortener exceptions.

    InvalidInputError:
        Raised when a short URL has no trailing path segment to extract.

    NotFoundError:
        Raised when a key is not registered.

    KeyGenerationError:
        Raised when no free key could be generated.
"""


class QuickLinkError(Exception):
    """Generic base class for shortener exceptions."""

    pass


class InvalidInputError(QuickLinkError, ValueError):
    """Exception raised when a short URL cannot be parsed into a key."""

    pass


class NotFoundError(QuickLinkError, LookupError):
    """Exception raised when no URL is registered under a key."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"URL not found for key: {key}")


class KeyGenerationError(QuickLinkError):
    """Exception raised when every generated key collided with a registered one."""

    pass

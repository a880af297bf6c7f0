"""Common utilities for URL shortener."""

from .headers import extract_forwarded_headers, get_request_host
from .logging_config import JsonFormatter, setup_logging, get_logger

__all__ = [
    "extract_forwarded_headers",
    "get_request_host",
    "JsonFormatter",
    "setup_logging",
    "get_logger",
]

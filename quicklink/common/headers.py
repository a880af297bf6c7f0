"""Header parsing utilities for URL shortener."""

from typing import Dict, Mapping, Optional


def extract_forwarded_headers(headers: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers mapping

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for
    """
    # Convert headers to lowercase for case-insensitive lookup
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        "forwarded_proto": headers_lower.get("x-forwarded-proto"),
        "forwarded_host": headers_lower.get("x-forwarded-host"),
        "forwarded_for": headers_lower.get("x-forwarded-for"),
    }


def get_request_host(
    headers: Mapping[str, str],
    trust_forwarded: bool = False,
    fallback_host: str = "localhost",
) -> str:
    """Get the host a request was addressed to.

    Priority:
    1. X-Forwarded-Host (only when trust_forwarded is set)
    2. Host header
    3. Fallback host

    Args:
        headers: Request headers mapping
        trust_forwarded: Whether to honour X-Forwarded-Host from a proxy
        fallback_host: Host used when the request carries none

    Returns:
        Host, including the port when the client sent one (e.g. short.ly:8080)
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}

    if trust_forwarded:
        forwarded_host = extract_forwarded_headers(headers_lower)["forwarded_host"]
        if forwarded_host:
            # Proxies may append hosts; the first one is the client's
            return forwarded_host.split(",")[0].strip()

    host = headers_lower.get("host")
    if host:
        return host.strip()

    return fallback_host

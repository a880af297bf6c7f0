#!/usr/bin/env python3
"""
Command-line client for a running URL shortener service.

Usage:
    quicklink-cli shorten <url>
    quicklink-cli resolve <key>
    quicklink-cli expand <short_url>
    quicklink-cli stats
    quicklink-cli health
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, Optional

import requests

from quicklink.common.logging_config import setup_logging


class QuickLinkCLI:
    """Command-line client for the JSON API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        verbose: bool = False,
        session: Optional[requests.Session] = None,
    ):
        """Initialize CLI."""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.session = session or requests.Session()

    def _print(self, payload: Dict[str, Any], ok: bool) -> int:
        print(json.dumps(payload, indent=2), file=sys.stdout if ok else sys.stderr)
        return 0 if ok else 1

    def _error(self, response: requests.Response) -> int:
        try:
            detail = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text
        return self._print(
            {"success": False, "status": response.status_code, "error": detail},
            ok=False,
        )

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        self.logger.debug(f"{method} {url}")
        return self.session.request(method, url, timeout=self.timeout, **kwargs)

    def shorten(self, url: str) -> int:
        """Shorten a URL."""
        response = self._request("POST", "/api/shorten", json={"url": url})
        if response.status_code != 200:
            return self._error(response)

        data = response.json()
        return self._print({"success": True, **data}, ok=True)

    def resolve(self, key: str) -> int:
        """Get the original URL for a key."""
        response = self._request("GET", f"/api/urls/{key}")
        if response.status_code != 200:
            return self._error(response)

        return self._print({"success": True, **response.json()}, ok=True)

    def expand(self, short_url: str) -> int:
        """Get the original URL for a complete short URL."""
        response = self._request("POST", "/api/expand", json={"short_url": short_url})
        if response.status_code != 200:
            return self._error(response)

        return self._print({"success": True, **response.json()}, ok=True)

    def stats(self) -> int:
        """Show service statistics."""
        response = self._request("GET", "/api/stats")
        if response.status_code != 200:
            return self._error(response)

        return self._print({"success": True, "statistics": response.json()}, ok=True)

    def health(self) -> int:
        """Check service health."""
        response = self._request("GET", "/api/health")
        if response.status_code != 200:
            return self._error(response)

        data = response.json()
        return self._print({"success": True, "health": data}, ok=data.get("status") == "healthy")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="quicklink URL shortener client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Get original URL for a key
  %(prog)s resolve aB3_x

  # Get original URL for a complete short link
  %(prog)s expand localhost:8080/aB3_x
        """
    )

    parser.add_argument(
        "--base-url",
        default=os.getenv("QUICKLINK_URL", "http://localhost:8080"),
        help="Service URL (default: from QUICKLINK_URL env or http://localhost:8080)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Request timeout in seconds"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    resolve_parser = subparsers.add_parser("resolve", help="Get original URL for a key")
    resolve_parser.add_argument("key", help="Short key to lookup")

    expand_parser = subparsers.add_parser("expand", help="Get original URL for a short URL")
    expand_parser.add_argument("short_url", help="Complete short URL")

    subparsers.add_parser("stats", help="Show service statistics")
    subparsers.add_parser("health", help="Check service health")

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = QuickLinkCLI(base_url=args.base_url, timeout=args.timeout, verbose=args.verbose)

    try:
        if args.command == "shorten":
            return cli.shorten(args.url)
        elif args.command == "resolve":
            return cli.resolve(args.key)
        elif args.command == "expand":
            return cli.expand(args.short_url)
        elif args.command == "stats":
            return cli.stats()
        elif args.command == "health":
            return cli.health()
    except requests.RequestException as e:
        return cli._print({"success": False, "error": f"Request failed: {e}"}, ok=False)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())

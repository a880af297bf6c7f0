"""FastAPI dependencies shared by the API and web routers."""

from fastapi import Request

from quicklink.common.headers import get_request_host


def request_host(request: Request) -> str:
    """Host the client used to reach the service.

    ``X-Forwarded-Host`` is honoured only when the app config sets
    ``trust_forwarded_host``.
    """
    config = request.app.state.config
    return get_request_host(
        request.headers,
        trust_forwarded=config.trust_forwarded_host,
    )

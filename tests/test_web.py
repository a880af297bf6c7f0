"""Tests for browser-facing routes."""

import re

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from web_app import create_app


SHORT_LINK = re.compile(r"testserver/([A-Za-z0-9_-]{5})")


@pytest.mark.asyncio
class TestWebRoutes:
    """Test the form and redirect flow."""

    async def test_homepage(self, client):
        """GET / serves the form."""
        response = await client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert '<form action="/" method="post">' in response.text
        assert 'name="url"' in response.text

    async def test_form_shortens_url(self, client):
        """POST / shows the original and short URL."""
        response = await client.post("/", data={"url": "https://example.com/very/long/path"})

        assert response.status_code == 200
        assert "https://example.com/very/long/path" in response.text
        assert SHORT_LINK.search(response.text) is not None

    async def test_form_then_redirect(self, client):
        """The short link from the form redirects temporarily to the original URL."""
        response = await client.post("/", data={"url": "https://example.com/very/long/path"})
        key = SHORT_LINK.search(response.text).group(1)

        redirect = await client.get(f"/{key}", follow_redirects=False)

        assert redirect.status_code == 307
        assert redirect.headers["location"] == "https://example.com/very/long/path"

    async def test_form_idempotent(self, client):
        """Submitting the same URL twice shows the same short link."""
        first = await client.post("/", data={"url": "https://example.com/a"})
        second = await client.post("/", data={"url": "https://example.com/a"})

        assert SHORT_LINK.search(first.text).group(1) == SHORT_LINK.search(second.text).group(1)

    async def test_form_escapes_url(self, client):
        """Submitted URLs are HTML-escaped in the result page."""
        response = await client.post("/", data={"url": "https://example.com/<script>"})

        assert response.status_code == 200
        assert "<script>" not in response.text
        assert "&lt;script&gt;" in response.text

    async def test_form_blank_url(self, client):
        """A blank submission shows the error page."""
        response = await client.post("/", data={"url": "   "})

        assert response.status_code == 400
        assert "Please enter a URL" in response.text

    async def test_form_missing_url(self, client):
        """A submission without the field is rejected."""
        response = await client.post("/", data={})
        assert response.status_code == 422

    async def test_redirect_unknown_key(self, client):
        """Unknown keys get the 404 page, never a redirect."""
        response = await client.get("/zzzzz", follow_redirects=False)

        assert response.status_code == 404
        assert "zzzzz" in response.text
        assert "location" not in response.headers

    async def test_redirect_after_api_shorten(self, client):
        """Keys created through the API redirect too."""
        create = await client.post("/api/shorten", json={"url": "https://github.com/user/repo"})
        key = create.json()["key"]

        response = await client.get(f"/{key}", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "https://github.com/user/repo"

    async def test_stylesheet(self, client):
        """Static CSS is served."""
        response = await client.get("/css/style.css")
        assert response.status_code == 200

    async def test_form_keeps_url_as_typed(self, client, service):
        """Surrounding whitespace is part of the stored URL, not trimmed away."""
        padded = await client.post("/", data={"url": " https://example.com/a"})
        plain = await client.post("/", data={"url": "https://example.com/a"})

        padded_key = SHORT_LINK.search(padded.text).group(1)
        plain_key = SHORT_LINK.search(plain.text).group(1)

        assert padded_key != plain_key
        assert service.resolve(padded_key) == " https://example.com/a"
        assert service.resolve(plain_key) == "https://example.com/a"

    async def test_form_ignores_forwarded_host_by_default(self, client):
        """The form renders the Host header unless forwarded hosts are trusted."""
        response = await client.post(
            "/",
            data={"url": "https://example.com/a"},
            headers={"X-Forwarded-Host": "short.ly"},
        )

        assert SHORT_LINK.search(response.text) is not None
        assert "short.ly/" not in response.text

    async def test_form_uses_trusted_forwarded_host(self, service):
        """Form and API render the same trusted X-Forwarded-Host."""
        app = create_app(service_instance=service, config=Config(trust_forwarded_host=True))
        headers = {"X-Forwarded-Host": "short.ly"}
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            form = await client.post("/", data={"url": "https://example.com/a"}, headers=headers)
            api = await client.post("/api/shorten", json={"url": "https://example.com/a"}, headers=headers)

        assert api.json()["short_url"].startswith("short.ly/")
        assert api.json()["short_url"] in form.text

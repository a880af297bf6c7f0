"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The URL to shorten", min_length=1, max_length=2048)

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        v = v.strip()
        if not v.startswith(('http://', 'https://')):
            raise ValueError('URL must start with http:// or https://')
        return v

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"}
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    key: str = Field(..., description="The short key")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The original long URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "key": "aB3_x",
                    "short_url": "short.ly/aB3_x",
                    "original_url": "https://example.com/very/long/path",
                }
            ]
        }
    }


class ExpandRequest(BaseModel):
    """Request to expand a full short URL."""

    short_url: str = Field(..., description="Short URL as returned by /api/shorten", min_length=1)


class URLInfoResponse(BaseModel):
    """Response with URL information."""

    key: str
    short_url: str
    original_url: str


class ExpandResponse(BaseModel):
    """Response with the URL behind a short URL."""

    key: str
    original_url: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    storage: str = Field(..., description="Storage status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    key_length: Optional[int] = None

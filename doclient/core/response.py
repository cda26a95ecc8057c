"""Transport metadata returned alongside every decoded entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

import httpx

HEADER_RATE_LIMIT = "RateLimit-Limit"
HEADER_RATE_REMAINING = "RateLimit-Remaining"
HEADER_RATE_RESET = "RateLimit-Reset"


@dataclass
class Rate:
    """Rate limit state reported by the API."""
    limit: int = 0
    remaining: int = 0
    reset: datetime | None = None

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "Rate":
        """Parse RateLimit-* headers; absent or garbled values stay zero."""
        rate = cls()
        try:
            rate.limit = int(headers.get(HEADER_RATE_LIMIT, 0))
        except ValueError:
            pass
        try:
            rate.remaining = int(headers.get(HEADER_RATE_REMAINING, 0))
        except ValueError:
            pass
        reset = headers.get(HEADER_RATE_RESET)
        if reset:
            try:
                rate.reset = datetime.fromtimestamp(int(reset), tz=timezone.utc)
            except (ValueError, OverflowError, OSError):
                pass
        return rate


@dataclass
class Response:
    """Wraps the raw httpx response of one API call."""
    http_response: httpx.Response
    rate: Rate = field(default_factory=Rate)

    @classmethod
    def from_http(cls, http_response: httpx.Response) -> "Response":
        return cls(
            http_response=http_response,
            rate=Rate.from_headers(http_response.headers),
        )

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def content(self) -> bytes:
        return self.http_response.content

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

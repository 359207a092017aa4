"""HTTP access restricted by an enable flag and a domain allow-list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable
from urllib.parse import urlsplit

import httpx

_MAX_BODY_CHARS = 50000
_MAX_HEADERS = 20


class WebAccessError(Exception):
    """Raised when a URL is refused or cannot be parsed."""


@dataclass
class WebResponse:
    """Status, selected headers and body text of a response."""

    status: int
    body: str
    headers: list[tuple[str, str]] = field(default_factory=list)


class WebRequester:
    """Issues HTTP requests to allowed domains."""

    def __init__(self, enabled: bool, allowed_domains: Iterable[str] = ()) -> None:
        self.enabled = enabled
        self.allowed_domains = list(allowed_domains)
        self._client = httpx.Client(
            timeout=30.0, headers={"User-Agent": "AutoCrab/0.1"}
        )

    def __enter__(self) -> "WebRequester":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP client."""
        self._client.close()

    def check_domain(self, url: str) -> None:
        """Raise WebAccessError unless the URL may be requested."""
        if not self.enabled:
            raise WebAccessError("Network access is disabled in configuration")
        if not self.allowed_domains:
            return

        try:
            parts = urlsplit(url)
            host = parts.hostname or ""
        except ValueError as exc:
            raise WebAccessError(f"Invalid URL: {exc}") from exc
        if not parts.scheme:
            raise WebAccessError("Invalid URL: relative URL without a base")

        for raw in self.allowed_domains:
            pattern = raw.strip()
            if pattern.startswith("*."):
                if host.endswith(pattern[1:]) or host == pattern[2:]:
                    return
            elif host == pattern:
                return

        raise WebAccessError(
            f"Domain '{host}' is not in the allowed list: {self.allowed_domains}"
        )

    def get(self, url: str) -> WebResponse:
        """GET a URL; the body is truncated past 50,000 characters."""
        self.check_domain(url)
        resp = self._client.get(url)
        headers = resp.headers.multi_items()[:_MAX_HEADERS]
        body = resp.text
        if len(body) > _MAX_BODY_CHARS:
            body = f"{body[:_MAX_BODY_CHARS]}...\n[内容截断，共 {len(body)} 字符]"
        return WebResponse(status=resp.status_code, body=body, headers=headers)

    def post_json(self, url: str, json_body: Any) -> WebResponse:
        """POST a JSON document and return the response body."""
        self.check_domain(url)
        resp = self._client.post(url, json=json_body)
        return WebResponse(status=resp.status_code, body=resp.text)
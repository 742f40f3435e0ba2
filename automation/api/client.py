"""Synchronous HTTP client for the JSONPlaceholder sandbox API.

The client is a thin wrapper over ``httpx.Client``: it fixes the base URL and
timeout from ``ApiConfig``, turns each request into an immutable
``ResponseSnapshot`` and logs status code and raw body the way the smoke
checks report them. Transport errors propagate unchanged.
"""

import json
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from automation.common.config import ApiConfig
from automation.common.logging import get_logger, log_performance

logger = get_logger("api_client")


@dataclass(frozen=True)
class ApiRequest:
    """Request descriptor: method, path relative to the base URL, optional JSON body."""

    method: str
    path: str
    json_body: Optional[Dict[str, Any]] = None

    def url(self, base_url: str) -> str:
        return base_url.rstrip("/") + self.path


@dataclass(frozen=True)
class ResponseSnapshot:
    """Read-only view of a completed response."""

    method: str
    url: str
    status_code: int
    text: str

    def json(self) -> Any:
        """Parse the body as JSON; raises ``json.JSONDecodeError`` on garbage."""
        return json.loads(self.text)


def build_client(
    config: Optional[ApiConfig] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Create the ``httpx.Client`` used by ``JsonPlaceholderClient``.

    ``transport`` lets tests plug in ``httpx.MockTransport``.
    """
    config = config or ApiConfig()
    return httpx.Client(
        base_url=config.api_base_url,
        timeout=httpx.Timeout(config.api_timeout_seconds),
        headers={"Accept": "application/json"},
        transport=transport,
    )


class JsonPlaceholderClient:
    """Scoped client; use as a context manager so the connection is always released."""

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or ApiConfig()
        self._client = build_client(self.config, transport=transport)

    def __enter__(self) -> "JsonPlaceholderClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def send(self, request: ApiRequest) -> ResponseSnapshot:
        """Send ``request`` and read the whole response body."""
        url = request.url(self.config.api_base_url)
        start = time.perf_counter()

        # ``json=`` sets Content-Type: application/json for us.
        response = self._client.request(
            request.method,
            request.path,
            json=request.json_body,
        )
        try:
            text = response.text
        finally:
            response.close()

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} request completed",
            url=url,
            status_code=response.status_code,
        )
        logger.info(f"{request.method} response body", body=text)
        log_performance(f"{request.method} {request.path}", duration_ms, status_code=response.status_code)

        return ResponseSnapshot(
            method=request.method,
            url=url,
            status_code=response.status_code,
            text=text,
        )

    def get(self, path: str) -> ResponseSnapshot:
        return self.send(ApiRequest("GET", path))

    def post(self, path: str, json_body: Dict[str, Any]) -> ResponseSnapshot:
        return self.send(ApiRequest("POST", path, json_body=json_body))

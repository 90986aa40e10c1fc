"""Outbound HTTP transport for upstream JSON endpoints.

Thin wrapper over a pooled ``requests.Session``. It does not categorize or
retry failures: ``requests`` exceptions (timeouts, connection errors, and
``HTTPError`` for non-2xx statuses) reach the caller unchanged.

Usage:
    from infrastructure.clients.http import HttpTransport

    transport = HttpTransport(timeout=10)
    body = transport.request("https://example.com/api?x=1")

    body = transport.request(
        "https://example.com/api",
        method="POST",
        body="q=hello",
        headers={"Content-Type": "application/x-www-form-urlencoded;charset=UTF-8"},
    )
"""

from typing import Any, Dict, Optional

import requests
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = "Lingo-Bot/1.0"


class HttpTransport:
    """HTTP client returning parsed JSON bodies.

    Attributes:
        timeout: Default timeout in seconds
        session: Requests session with connection pooling
    """

    def __init__(
        self,
        timeout: float = 10,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Default timeout for requests in seconds
            user_agent: User-Agent header for every request
            session: Optional pre-built session (tests, shared pools)
        """
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json, text/plain, */*",
            }
        )
        self._logger = logger.bind(component="http_transport")

    @property
    def session(self) -> requests.Session:
        return self._session

    def request(
        self,
        url: str,
        method: str = "GET",
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            url: Fully built URL including query string
            method: HTTP method (GET or POST)
            body: Pre-encoded request body
            headers: Additional headers
            timeout: Request timeout (overrides default)

        Returns:
            Parsed JSON (lists/dicts)

        Raises:
            requests.RequestException: On any transport or HTTP status failure.
            ValueError: If the body is not valid JSON.
        """
        timeout = timeout or self.timeout
        log = self._logger.bind(method=method, url_length=len(url))
        log.debug("http_request")

        response = self._session.request(
            method=method,
            url=url,
            data=body,
            headers=headers,
            timeout=timeout,
        )
        log = log.bind(status_code=response.status_code)
        response.raise_for_status()

        log.debug("http_response")
        return response.json()

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("http_transport_closed")


__all__ = ["HttpTransport", "DEFAULT_USER_AGENT"]

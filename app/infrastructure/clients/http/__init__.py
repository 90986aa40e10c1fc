"""HTTP transport client."""

from infrastructure.clients.http.client import DEFAULT_USER_AGENT, HttpTransport

__all__ = ["HttpTransport", "DEFAULT_USER_AGENT"]

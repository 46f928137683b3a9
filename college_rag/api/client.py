"""Shared HTTP client for the auth and core services."""

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin wrapper over a ``requests.Session`` bound to one service.

    Adds the bearer token when one is set, applies a default timeout and
    raises ``requests.HTTPError`` for every error status. Transport errors
    from ``requests`` propagate unchanged.

    Args:
        base_url: Service root, e.g. ``http://localhost:8081``.
        access_token: Bearer token sent in the Authorization header.
        timeout: Default per-request timeout in seconds.
        session: Session to reuse; a new one is created when omitted.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.timeout = timeout
        self.session = session or requests.Session()

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Send a request and raise on error status.

        Args:
            method: HTTP method.
            path: Path relative to ``base_url``.
            timeout: Overrides the default timeout for this call.
            **kwargs: Passed through to ``Session.request`` (json, params,
                data, files, stream, headers).

        Returns:
            The successful response.

        Raises:
            requests.HTTPError: If the server answered with an error status.
            requests.Timeout: If the request exceeded its timeout.
            requests.ConnectionError: If no response was received.
        """
        headers = {**self._headers(), **kwargs.pop("headers", {})}
        url = self.url(path)
        response = self.session.request(
            method,
            url,
            headers=headers,
            timeout=self.timeout if timeout is None else timeout,
            **kwargs,
        )
        if not response.ok:
            logger.debug("%s %s -> HTTP %s", method, url, response.status_code)
        response.raise_for_status()
        return response

    def get(self, path: str, **kwargs: Any) -> Any:
        return self.request("GET", path, **kwargs).json()

    def post(self, path: str, **kwargs: Any) -> Any:
        response = self.request("POST", path, **kwargs)
        return response.json() if response.content else None

    def put(self, path: str, **kwargs: Any) -> Any:
        return self.request("PUT", path, **kwargs).json()

    def delete(self, path: str, **kwargs: Any) -> Any:
        response = self.request("DELETE", path, **kwargs)
        return response.json() if response.content else None


def error_message(exc: Exception, default: str) -> str:
    """Best user-facing message for a failed call.

    Prefers the ``error`` field of a JSON error body, as the core API sends
    it, and falls back to ``default``.
    """
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
    return default

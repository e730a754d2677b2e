"""HTTP client for the MantisHub REST API.

This intentionally wraps a `requests.Session` to keep HTTP calls out of the
orchestration code and make tests easy (inject a mocked session).
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from mantishub_issue_action.errors import HTTPStatusError, TransportError

logger = logging.getLogger(__name__)

ALLOWED_METHODS: frozenset[str] = frozenset({"GET", "POST", "PATCH"})


class MantisClient:
    """Performs single, unretried requests against a MantisHub instance."""

    def __init__(
        self,
        *,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("MantisHub api key is required")

        self._timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        # MantisHub expects the raw token, without a "Bearer" scheme.
        self._session.headers.update(
            {
                "Authorization": api_key,
                "Content-Type": "application/json",
            }
        )

    def request(self, url: str, method: str = "GET", body: Any | None = None) -> str:
        """Send one request and return the raw response text.

        Args:
            url: Absolute URL.
            method: One of GET, POST, PATCH.
            body: Optional object, sent JSON-encoded.

        Returns:
            The response body, unparsed, for any 2xx status.

        Raises:
            HTTPStatusError: The server answered with a non-2xx status.
            TransportError: The request never produced a response.
        """

        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        data = json.dumps(body) if body is not None else None
        try:
            resp = self._session.request(method, url, data=data, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error("Request to MantisHub failed", extra={"url": url, "error": str(e)})
            raise TransportError(e) from e

        if not 200 <= resp.status_code < 300:
            logger.error(
                "Request failed",
                extra={"url": url, "status_code": resp.status_code, "body": resp.text},
            )
            raise HTTPStatusError(status_code=resp.status_code, body=resp.text)

        return resp.text

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> MantisClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

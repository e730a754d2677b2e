"""Issue creation against the MantisHub REST API."""

from __future__ import annotations

import json
import logging
from typing import Any

from mantishub_issue_action.client import MantisClient
from mantishub_issue_action.models import IssueRequest

logger = logging.getLogger(__name__)

ISSUES_PATH = "/api/rest/issues"


class IssueCreator:
    """Creates one issue per call; no idempotency, no retries."""

    def __init__(self, *, client: MantisClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url.removesuffix("/")

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}{ISSUES_PATH}"

    def create_issue(self, request: IssueRequest) -> dict[str, Any]:
        """POST the issue and return the decoded response.

        A body that is not valid JSON raises `json.JSONDecodeError` unchanged.
        """

        endpoint = self.endpoint
        logger.info("Making POST request to create new issue", extra={"endpoint": endpoint})

        text = self._client.request(endpoint, "POST", request.to_payload())
        response: dict[str, Any] = json.loads(text)

        logger.info("Issue created", extra={"response": response})
        return response

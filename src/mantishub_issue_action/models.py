"""Request and response shapes for the MantisHub issues endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from mantishub_issue_action.errors import ResponseShapeError


class NamedRef(BaseModel):
    """A `{"name": ...}` reference, as MantisHub expects for projects and categories."""

    model_config = ConfigDict(frozen=True)

    name: str


class IssueRequest(BaseModel):
    """Validated body for `POST /api/rest/issues`.

    Only built by `mantishub_issue_action.validation.validate_inputs`, which
    guarantees every string is non-empty and trimmed. Field order matches the
    serialized JSON order.
    """

    model_config = ConfigDict(frozen=True)

    summary: str
    description: str
    category: NamedRef
    project: NamedRef

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


def extract_issue_id(response: Any) -> Any:
    """Return `response["issue"]["id"]` from a decoded create-issue response."""

    issue = response.get("issue") if isinstance(response, dict) else None
    if not isinstance(issue, dict) or issue.get("id") is None:
        raise ResponseShapeError("Response does not contain issue.id")
    return issue["id"]

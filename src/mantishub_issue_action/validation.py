"""Validation of raw action inputs into an issue request."""

from __future__ import annotations

from mantishub_issue_action.config import ActionInputs
from mantishub_issue_action.errors import InputValidationError
from mantishub_issue_action.models import IssueRequest, NamedRef

# Checked in this order; the first failure wins.
REQUIRED_FIELDS: tuple[str, ...] = ("summary", "description", "category", "project")

# Flat inputs that MantisHub expects wrapped as {"name": ...}.
NAMED_FIELDS: frozenset[str] = frozenset({"category", "project"})


def _require(field: str, value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InputValidationError(field)
    return value.strip()


def validate_inputs(inputs: ActionInputs) -> IssueRequest:
    """Trim and check the issue fields, then map them onto the request shape.

    Raises:
        InputValidationError: for the first field that is empty or whitespace-only.
    """

    cleaned = {field: _require(field, getattr(inputs, field)) for field in REQUIRED_FIELDS}

    payload: dict[str, str | NamedRef] = {
        field: NamedRef(name=value) if field in NAMED_FIELDS else value
        for field, value in cleaned.items()
    }
    return IssueRequest.model_validate(payload)

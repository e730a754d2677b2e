"""Exception types raised while creating a MantisHub issue.

Components raise; only `mantishub_issue_action.main.main` turns an error into a
process exit code.
"""

from __future__ import annotations

from dataclasses import dataclass


class MantisActionError(Exception):
    """Base class for all action failures."""


class ConfigurationError(MantisActionError):
    """Raised when the url, api-key or project input is missing."""


@dataclass(frozen=True, slots=True)
class InputValidationError(MantisActionError):
    """Raised when a required issue field is empty after trimming."""

    field: str

    def __str__(self) -> str:
        return f"The '{self.field}' parameter is required and must be a non-empty string."


@dataclass(frozen=True, slots=True)
class HTTPStatusError(MantisActionError):
    """Raised when MantisHub answers with a non-2xx status."""

    status_code: int
    body: str

    def __str__(self) -> str:
        return f"Request failed with status code {self.status_code}: {self.body}"


@dataclass(frozen=True, slots=True)
class TransportError(MantisActionError):
    """Raised when the request could not reach MantisHub at all."""

    error: Exception

    def __str__(self) -> str:
        return f"Request could not be completed: {self.error}"


class ResponseShapeError(MantisActionError):
    """Raised when a successful response does not contain `issue.id`."""

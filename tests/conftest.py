"""Test configuration and fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from mantishub_issue_action.config import ActionInputs
from mantishub_issue_action.logging import JsonFormatter

INPUT_VARIABLES = (
    "INPUT_URL",
    "INPUT_API-KEY",
    "INPUT_PROJECT",
    "INPUT_SUMMARY",
    "INPUT_DESCRIPTION",
    "INPUT_CATEGORY",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Remove action inputs from the environment and run from an empty directory."""
    for name in INPUT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def action_inputs() -> ActionInputs:
    """Provide a complete, valid set of action inputs."""
    return ActionInputs(
        url="https://example.mantishub.io",
        api_key="KEY123",
        project="Demo",
        summary="Bug found",
        description="Steps to reproduce",
        category="General",
    )


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Drop the JSON handler `configure_logging` installs during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)

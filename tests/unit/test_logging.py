"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging

import pytest

from mantishub_issue_action.logging import configure_logging


def test_records_are_json_on_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("debug")

    logging.getLogger("mantishub_issue_action.test").info(
        "Issue created", extra={"response": {"issue": {"id": 1}}}
    )

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip())
    assert record["level"] == "INFO"
    assert record["logger"] == "mantishub_issue_action.test"
    assert record["message"] == "Issue created"
    assert record["extra"] == {"response": {"issue": {"id": 1}}}


def test_exceptions_are_included(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO")

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logging.getLogger("mantishub_issue_action.test").exception("Failed")

    record = json.loads(capsys.readouterr().err.strip())
    assert "RuntimeError: boom" in record["exception"]


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging("chatty")

    assert logging.getLogger().level == logging.INFO


def test_urllib3_is_quiet_at_debug() -> None:
    configure_logging("DEBUG")

    assert logging.getLogger("urllib3").level == logging.INFO

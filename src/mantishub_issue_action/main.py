"""CLI entrypoint for the MantisHub issue action.

Reads workflow inputs, creates one issue and reports its id as the `issue-id`
workflow output.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, TextIO

from pydantic import ValidationError

from mantishub_issue_action import __version__
from mantishub_issue_action.client import MantisClient
from mantishub_issue_action.config import ActionInputs, load_inputs
from mantishub_issue_action.errors import (
    ConfigurationError,
    HTTPStatusError,
    InputValidationError,
)
from mantishub_issue_action.issues import IssueCreator
from mantishub_issue_action.logging import configure_logging
from mantishub_issue_action.models import extract_issue_id
from mantishub_issue_action.outputs import set_output
from mantishub_issue_action.validation import validate_inputs

logger = logging.getLogger(__name__)

OUTPUT_ISSUE_ID = "issue-id"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mantishub-create-issue",
        description=(
            "Create a MantisHub issue from INPUT_URL, INPUT_API-KEY, INPUT_PROJECT, "
            "INPUT_SUMMARY, INPUT_DESCRIPTION and INPUT_CATEGORY"
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"mantishub-issue-action {__version__}"
    )
    return parser


def run(
    inputs: ActionInputs,
    *,
    client: MantisClient | None = None,
    stdout: TextIO | None = None,
) -> Any:
    """Create the issue described by `inputs` and return its id.

    Raises instead of exiting; `main` decides the exit code.
    """

    if not inputs.url or not inputs.api_key or not inputs.project:
        raise ConfigurationError("Project name, url and api-key inputs are required.")

    request = validate_inputs(inputs)

    owns_client = client is None
    if client is None:
        client = MantisClient(api_key=inputs.api_key)
    try:
        creator = IssueCreator(client=client, base_url=inputs.url)
        response = creator.create_issue(request)
    finally:
        if owns_client:
            client.close()

    issue_id = extract_issue_id(response)
    set_output(OUTPUT_ISSUE_ID, issue_id, stream=stdout)
    return issue_id


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    parser.parse_args(argv)

    try:
        inputs = load_inputs()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check the action inputs):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    configure_logging(inputs.log_level)

    try:
        issue_id = run(inputs)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    except InputValidationError as e:
        logger.error(str(e), extra={"field": e.field})
        return 1

    except HTTPStatusError as e:
        logger.error(
            "Failed to create issue",
            extra={"status_code": e.status_code, "response_body": e.body},
        )
        return 1

    except Exception:
        logger.exception("Failed to create issue")
        return 1

    logger.info("Issue id reported", extra={"issue_id": issue_id})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

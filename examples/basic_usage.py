#!/usr/bin/env python3
"""Programmatic issue creation example.

This demonstrates using the action components directly instead of relying on
`INPUT_*` environment variables:

* build the inputs from command-line arguments
* create a MantisHub issue
* print the `issue-id` workflow output line
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from mantishub_issue_action.config import ActionInputs
from mantishub_issue_action.errors import MantisActionError
from mantishub_issue_action.logging import configure_logging
from mantishub_issue_action.main import run


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a MantisHub issue (programmatic example).")
    parser.add_argument(
        "--url", required=True, help='MantisHub base URL, e.g. "https://acme.mantishub.io"'
    )
    parser.add_argument("--project", required=True, help="Project name")
    parser.add_argument("--category", default="General", help="Category name")
    parser.add_argument("--summary", required=True, help="Issue summary")
    parser.add_argument("--description", required=True, help="Issue description")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    configure_logging("INFO")

    inputs = ActionInputs(
        url=args.url,
        # Keep the token out of shell history.
        api_key=os.environ.get("MANTISHUB_API_KEY", ""),
        project=args.project,
        summary=args.summary,
        description=args.description,
        category=args.category,
    )

    try:
        issue_id = run(inputs)
    except MantisActionError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"Created issue #{issue_id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""GitHub Actions workflow output commands."""

from __future__ import annotations

import sys
from typing import Any, TextIO


def format_output(name: str, value: Any) -> str:
    return f"::set-output name={name}::{value}"


def set_output(name: str, value: Any, *, stream: TextIO | None = None) -> None:
    """Write a workflow output line to stdout (or `stream`)."""

    out = stream if stream is not None else sys.stdout
    print(format_output(name, value), file=out, flush=True)

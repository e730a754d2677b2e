"""MantisHub issue action.

Creates a single MantisHub issue from GitHub Actions workflow inputs:
- inputs read from `INPUT_*` environment variables (or a local `.env`)
- structured logging to stderr
- the created issue id reported as a workflow output
"""

__version__ = "0.1.0"

from mantishub_issue_action.config import ActionInputs, load_inputs

__all__ = ["__version__", "ActionInputs", "load_inputs"]

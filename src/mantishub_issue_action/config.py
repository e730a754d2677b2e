"""Configuration for the MantisHub issue action.

Inputs are loaded from:
- environment variables set by the GitHub Actions runner (`INPUT_<NAME>`)
- and a local `.env` file (if present), which is handy for manual runs

Loading never fails on missing values. Every input defaults to an empty string;
required-ness is enforced later by the orchestrator and the validator.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ActionInputs(BaseModel):
    """Raw action inputs, kept verbatim (no trimming)."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    api_key: str = Field(default="", repr=False)
    project: str = ""
    summary: str = ""
    description: str = ""
    category: str = ""

    log_level: str = "INFO"


class WorkflowEnvironment(BaseSettings):
    """Reads `ActionInputs` from the environment.

    Environment variables:
    - INPUT_URL
    - INPUT_API-KEY
    - INPUT_PROJECT
    - INPUT_SUMMARY
    - INPUT_DESCRIPTION
    - INPUT_CATEGORY
    - LOG_LEVEL  (optional)

    Notes:
        Only the aliases are looked up. Enabling `populate_by_name` here would
        make pydantic-settings also read bare `URL`, `PROJECT`, ... variables.
    """

    url: str = Field(
        default="",
        validation_alias="INPUT_URL",
        description="Base URL of the MantisHub instance",
    )
    api_key: str = Field(
        default="",
        validation_alias="INPUT_API-KEY",
        repr=False,
        description="API token sent verbatim in the Authorization header",
    )
    project: str = Field(default="", validation_alias="INPUT_PROJECT")
    summary: str = Field(default="", validation_alias="INPUT_SUMMARY")
    description: str = Field(default="", validation_alias="INPUT_DESCRIPTION")
    category: str = Field(default="", validation_alias="INPUT_CATEGORY")

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )


def load_inputs() -> ActionInputs:
    """Read the action inputs from the environment."""

    return ActionInputs(**WorkflowEnvironment().model_dump())

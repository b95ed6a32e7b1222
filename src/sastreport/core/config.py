"""Configuration management for report generation.

Loads configuration from environment variables using Pydantic models.
Provides sensible defaults for all settings while allowing override via
environment or explicit keyword arguments.

Provides:
- Config: Pydantic model with all report settings
- load_config: Factory function to create Config instance
- resolve_tool_version: Pick the tool version written into reports
"""

import os
from importlib import metadata
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_TOOL_VERSION = "devel"
DEFAULT_TOOL_NAME = "gosec"
DEFAULT_TOOL_INFORMATION_URI = "https://github.com/securego/gosec/"
PACKAGE_NAME = "sastreport"


def _env_root_paths() -> list[str]:
    raw = os.getenv("SASTREPORT_ROOT_PATHS", "")
    return [path for path in raw.split(os.pathsep) if path]


class Config(BaseModel):
    """Report settings loaded from environment.

    Attributes:
        root_paths: Prefixes stripped from file paths (SASTREPORT_ROOT_PATHS,
            os.pathsep separated)
        tool_name: Driver name written into the SARIF tool section
        tool_information_uri: Driver homepage
        tool_version: Explicit driver version (SASTREPORT_TOOL_VERSION)
        sort_issues: Order issues by severity before conversion
        log_level: Minimum level logged by the CLI (SASTREPORT_LOG_LEVEL)
    """

    root_paths: list[str] = Field(default_factory=_env_root_paths)

    tool_name: str = Field(default=DEFAULT_TOOL_NAME)
    tool_information_uri: str = Field(default=DEFAULT_TOOL_INFORMATION_URI)
    tool_version: str | None = Field(
        default_factory=lambda: os.getenv("SASTREPORT_TOOL_VERSION") or None
    )

    sort_issues: bool = Field(default=True)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default_factory=lambda: os.getenv("SASTREPORT_LOG_LEVEL", "WARNING"),
        validate_default=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_config(**overrides) -> Config:
    """Load configuration from environment.

    Keyword arguments with a value other than None override the
    environment and defaults.

    Returns:
        Populated Config instance
    """
    return Config(**{key: value for key, value in overrides.items() if value is not None})


def resolve_tool_version(config: Config) -> str:
    """Return the tool version for the report driver.

    Uses the configured version, then the installed package metadata,
    then DEFAULT_TOOL_VERSION.
    """
    if config.tool_version:
        return config.tool_version
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return DEFAULT_TOOL_VERSION

"""Configuration management for the smoke checks.

This module centralizes environment-driven configuration for every flow in
the repository (API checks, browser search check, pipeline runner). It builds
on ``pydantic_settings.BaseSettings`` so configuration can be provided via
environment variables, ``.env`` files, or defaults.

Highlights
- Strongly-typed settings with sensible defaults
- One place to discover the environment variables each flow reads
- Small flow-specific subclasses to keep concerns clear

Usage
- Inject the appropriate config where a flow starts:
  ``config = ApiConfig()``
- Or select dynamically: ``config = get_config("browser")``
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class for all flows.

    Field names double as environment variable names (case-insensitive), so
    ``automation_log_level`` is read from ``AUTOMATION_LOG_LEVEL``.

    Notes
    - Add new shared settings here so the flow configs inherit them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    automation_env: str = Field(default="local")

    # Logging
    automation_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    automation_log_format: Literal["console", "json"] = Field(default="console")

    @field_validator("automation_log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class ApiConfig(BaseConfig):
    """Configuration for the HTTP API smoke checks.

    The timeout is handed to the HTTP client as-is; nothing is retried.
    """

    api_base_url: str = Field(default="https://jsonplaceholder.typicode.com", min_length=8)
    api_timeout_seconds: float = Field(default=30.0, gt=0)


class BrowserConfig(BaseConfig):
    """Configuration for the browser search check."""

    browser_name: Literal["chromium", "firefox", "webkit"] = Field(default="chromium")
    browser_headless: bool = Field(default=True)
    browser_slow_mo_ms: float = Field(default=0, ge=0)

    search_url: str = Field(default="https://www.google.com")
    search_input_name: str = Field(default="q", min_length=1)
    search_query: str = Field(default="Selenium Java automation tutorial", min_length=1)
    search_title_timeout_seconds: float = Field(default=40.0, gt=0)


class PipelineConfig(BaseConfig):
    """Configuration for the checkout/build/test pipeline.

    ``pipeline_repo_url`` has no default; the checkout stage cannot run
    without it. An unset build command means "install the checkout with the
    running interpreter's pip".
    """

    pipeline_repo_url: Optional[str] = Field(default=None)
    pipeline_branch: Optional[str] = Field(default=None)
    pipeline_workdir: str = Field(default=".pipeline")
    pipeline_build_command: Optional[str] = Field(default=None)
    pipeline_test_target: str = Field(
        default="tests/api/test_json_placeholder_api.py::TestJsonPlaceholderApi"
    )


def get_config(name: str) -> BaseConfig:
    """Get configuration for a specific flow.

    Parameters
    - name: Literal name: ``api``, ``browser``, or ``pipeline``.

    Returns
    - A concrete ``BaseConfig`` subclass reading the right env vars.
    """
    config_map = {
        "api": ApiConfig,
        "browser": BrowserConfig,
        "pipeline": PipelineConfig,
    }

    # Unknown names get the shared settings only.
    config_class = config_map.get(name, BaseConfig)
    return config_class()

"""Common utilities shared across checks.

Includes:
- ``config``: Pydantic-based configuration from environment variables.
- ``logging``: structured logging setup with structlog.
- ``errors``: check failures, timeouts, and pipeline stage errors.

Import pattern:
- from automation.common.config import ApiConfig
- from automation.common.logging import configure_logging
"""

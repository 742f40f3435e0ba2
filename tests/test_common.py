"""Tests for common utilities."""

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from automation.common.config import ApiConfig, BaseConfig, BrowserConfig, PipelineConfig, get_config
from automation.common.errors import (
    CheckFailure,
    CheckTimeout,
    PipelineStageError,
    expect_contains,
    expect_equal,
    expect_non_empty,
    expect_not_none,
    expect_present,
)
from automation.common.logging import CheckLogger, configure_logging


def test_config_loading():
    """Test configuration loading."""
    config = BaseConfig()
    assert config.automation_env == "local"
    assert config.automation_log_level == "INFO"


def test_api_config_defaults():
    config = ApiConfig()
    assert config.api_base_url == "https://jsonplaceholder.typicode.com"
    assert config.api_timeout_seconds == 30.0


def test_api_config_from_environment(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://localhost:3000")
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "5")

    config = ApiConfig()
    assert config.api_base_url == "http://localhost:3000"
    assert config.api_timeout_seconds == 5.0


def test_api_config_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        ApiConfig()


def test_browser_config_defaults():
    config = BrowserConfig()
    assert config.search_url == "https://www.google.com"
    assert config.search_input_name == "q"
    assert config.search_query == "Selenium Java automation tutorial"
    assert config.search_title_timeout_seconds == 40.0


def test_pipeline_config_defaults(monkeypatch):
    monkeypatch.delenv("PIPELINE_REPO_URL", raising=False)
    config = PipelineConfig()
    assert config.pipeline_repo_url is None
    assert config.pipeline_test_target.endswith("::TestJsonPlaceholderApi")


def test_get_config_selects_by_name():
    assert isinstance(get_config("api"), ApiConfig)
    assert isinstance(get_config("browser"), BrowserConfig)
    assert isinstance(get_config("pipeline"), PipelineConfig)
    assert type(get_config("unknown")) is BaseConfig


def test_logging_configuration():
    """Test logging configuration."""
    # This should not raise an exception
    configure_logging("test-service", "INFO", "json")
    configure_logging("test-service", "debug", "console")


def test_check_logger_records_steps_and_pass():
    with capture_logs() as logs:
        with CheckLogger("get_post_by_id", post_id=1) as log:
            log.step("Response received", status_code=200)
            log.passed(status_code=200)

    assert [e["event"] for e in logs] == ["Response received", "Check passed"]
    assert all(e["check"] == "get_post_by_id" and e["post_id"] == 1 for e in logs)
    assert logs[1]["outcome"] == "passed"
    assert logs[1]["duration_ms"] >= 0
    assert log.outcome == "passed"


def test_check_logger_records_failure_and_reraises():
    with capture_logs() as logs:
        with pytest.raises(CheckTimeout):
            with CheckLogger("search_title") as log:
                raise CheckTimeout("Title never changed", 40)

    assert log.outcome == "failed"
    assert logs[-1]["log_level"] == "error"
    assert logs[-1]["error_type"] == "CheckTimeout"


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("AUTOMATION_LOG_LEVEL", "debug")
    assert BaseConfig().automation_log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("AUTOMATION_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        BaseConfig()


def test_check_failure_reports_expected_and_actual():
    error = CheckFailure("ID should be 1", expected=1, actual=2)
    assert error.expected == 1
    assert error.actual == 2
    assert str(error) == "ID should be 1: expected 1, got 2"


def test_check_failure_without_values():
    assert str(CheckFailure("Body is not JSON")) == "Body is not JSON"


def test_check_timeout_message():
    error = CheckTimeout("Title never changed", 40.0)
    assert error.timeout_seconds == 40.0
    assert "40s" in str(error)


def test_pipeline_stage_error():
    error = PipelineStageError("build", 2, results=["checkout"])
    assert error.stage == "build"
    assert error.returncode == 2
    assert error.results == ["checkout"]
    assert "build" in str(error)


def test_expectation_helpers_pass():
    expect_equal(1, 1, "equal")
    expect_not_none(0, "not none")
    expect_non_empty("title", "non empty")
    expect_contains("Selenium - Google Search", "Selenium", "contains")
    assert expect_present({"id": 1}, "id", "present") == 1


@pytest.mark.parametrize(
    "call",
    [
        lambda: expect_equal(1, 2, "equal"),
        lambda: expect_not_none(None, "not none"),
        lambda: expect_non_empty("", "non empty"),
        lambda: expect_non_empty(None, "non empty"),
        lambda: expect_contains("Google", "Selenium", "contains"),
        lambda: expect_present({"id": 1}, "title", "present"),
    ],
)
def test_expectation_helpers_fail(call):
    with pytest.raises(CheckFailure):
        call()

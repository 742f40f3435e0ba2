"""Error taxonomy for the smoke checks.

- ``CheckFailure``: an observed value did not match the expectation.
- ``CheckTimeout``: a wait condition did not hold within its timeout.
- ``PipelineStageError``: a pipeline stage exited with a non-zero code.
- ``ConfigurationError``: a required setting is missing.

Network errors raised by ``httpx`` are not wrapped; they reach the caller
unchanged.
"""

from typing import Any, List, Optional, Sequence

_MISSING = object()


class AutomationError(Exception):
    """Base class for all errors raised by the checks."""
    pass


class CheckFailure(AutomationError):
    """An assertion on an observed value failed."""

    def __init__(self, message: str, expected: Any = _MISSING, actual: Any = _MISSING):
        self.message = message
        self.expected = None if expected is _MISSING else expected
        self.actual = None if actual is _MISSING else actual
        self._has_values = expected is not _MISSING or actual is not _MISSING
        super().__init__(message)

    def __str__(self) -> str:
        if not self._has_values:
            return self.message
        return f"{self.message}: expected {self.expected!r}, got {self.actual!r}"


class CheckTimeout(AutomationError):
    """A wait condition did not become true in time."""

    def __init__(self, message: str, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"{message} (timed out after {timeout_seconds:g}s)")


class PipelineStageError(AutomationError):
    """A pipeline stage failed; later stages were not run."""

    def __init__(self, stage: str, returncode: int, results: Optional[Sequence[Any]] = None):
        self.stage = stage
        self.returncode = returncode
        self.results: List[Any] = list(results or [])
        super().__init__(f"Stage '{stage}' failed with exit code {returncode}")


class ConfigurationError(AutomationError):
    """Required configuration is missing or invalid."""
    pass


def expect_equal(expected: Any, actual: Any, message: str) -> None:
    if actual != expected:
        raise CheckFailure(message, expected=expected, actual=actual)


def expect_not_none(value: Any, message: str) -> None:
    if value is None:
        raise CheckFailure(message, expected="a value", actual=None)


def expect_present(data: dict, key: str, message: str) -> Any:
    """Require ``key`` in a JSON object and return its value."""
    if key not in data:
        raise CheckFailure(message, expected=f"field '{key}'", actual=sorted(data))
    return data[key]


def expect_non_empty(value: Any, message: str) -> None:
    if not hasattr(value, "__len__"):
        raise CheckFailure(message, expected="a non-empty string or collection", actual=value)
    if len(value) == 0:
        raise CheckFailure(message, expected="a non-empty value", actual=value)


def expect_contains(haystack: str, needle: str, message: str) -> None:
    if needle not in haystack:
        raise CheckFailure(message, expected=f"text containing {needle!r}", actual=haystack)

#!/usr/bin/env python3
"""Command-line entry point for the smoke checks."""

import argparse
import subprocess
import sys
from typing import List, Optional

import httpx
from playwright.sync_api import Error as PlaywrightError
from pydantic import ValidationError

from automation.api.checks import run_api_checks
from automation.browser.search import run_search_check
from automation.common.config import ApiConfig, BaseConfig, BrowserConfig, PipelineConfig
from automation.common.errors import AutomationError
from automation.common.logging import configure_logging, get_logger
from automation.pipeline.runner import build_default_pipeline

logger = get_logger("cli")


def run_api() -> None:
    """Run the GET and POST checks against the sandbox API."""
    snapshots = run_api_checks(ApiConfig())
    for snapshot in snapshots:
        print(f"✅ {snapshot.method} {snapshot.url} -> {snapshot.status_code}")


def run_ui() -> None:
    """Run the browser search check."""
    result = run_search_check(BrowserConfig())
    print(f"✅ Title contains {result.query!r}: {result.final_title}")


def run_pipeline(repo_url: Optional[str], branch: Optional[str], workdir: Optional[str]) -> None:
    """Run checkout, build and test stages; stops at the first failure."""
    overrides = {
        "pipeline_repo_url": repo_url,
        "pipeline_branch": branch,
        "pipeline_workdir": workdir,
    }
    config = PipelineConfig(**{k: v for k, v in overrides.items() if v is not None})
    for result in build_default_pipeline(config).run():
        print(f"✅ {result.name} ({result.duration_ms:.0f} ms)")


def run_tests(markers: str, extra: List[str]) -> int:
    """Run pytest with a marker expression and return its exit code."""
    args = [sys.executable, "-m", "pytest", "tests", "-m", markers, "-v", "--tb=short", *extra]
    return subprocess.run(args, check=False).returncode


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Smoke automation checks")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("api", help="Run the JSONPlaceholder API smoke checks")
    subparsers.add_parser("ui", help="Run the browser search smoke check")

    pipeline_parser = subparsers.add_parser("pipeline", help="Run checkout, build and test stages")
    pipeline_parser.add_argument("--repo-url", help="Repository to check out")
    pipeline_parser.add_argument("--branch", help="Branch to check out")
    pipeline_parser.add_argument("--workdir", help="Directory to check out into")

    test_parser = subparsers.add_parser("test", help="Run pytest for a marker expression")
    test_parser.add_argument("-m", "--markers", default="not smoke and not ui")
    test_parser.add_argument("pytest_args", nargs=argparse.REMAINDER)

    args = parser.parse_args(argv)

    try:
        base = BaseConfig()
    except ValidationError as e:
        print(f"❌ Invalid configuration: {e}")
        return 2
    configure_logging(f"automation-{args.command}", base.automation_log_level, base.automation_log_format)

    if args.command == "test":
        return run_tests(args.markers, args.pytest_args)

    try:
        if args.command == "api":
            run_api()
        elif args.command == "ui":
            run_ui()
        elif args.command == "pipeline":
            run_pipeline(args.repo_url, args.branch, args.workdir)
    except (AutomationError, httpx.HTTPError, PlaywrightError) as e:
        logger.error("Check failed", command=args.command, error=str(e))
        print(f"❌ {args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

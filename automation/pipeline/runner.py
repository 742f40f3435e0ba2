"""Three-stage pipeline: checkout, build, test.

Stages run one after another as shell commands. The first stage that exits
non-zero stops the pipeline with ``PipelineStageError``; nothing is retried
and later stages are skipped. ``Jenkinsfile`` at the repository root
declares the same stages for CI.
"""

import os
import shlex
import shutil
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from automation.common.config import PipelineConfig
from automation.common.errors import ConfigurationError, PipelineStageError
from automation.common.logging import get_logger, log_performance

logger = get_logger("pipeline")


@dataclass(frozen=True)
class Stage:
    """One shell command. ``fresh_dir`` is deleted before the command runs."""

    name: str
    command: str
    cwd: Optional[Path] = None
    fresh_dir: Optional[Path] = None


@dataclass(frozen=True)
class StageResult:
    name: str
    command: str
    returncode: int
    stdout: str
    stderr: str
    duration_ms: float

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    command: str,
    description: str,
    cwd: Optional[Path] = None,
    env: Optional[Dict[str, str]] = None,
) -> StageResult:
    """Run a shell command with logging.

    Never raises on a non-zero exit code; the caller decides what a failure
    means.
    """
    logger.info(f"Running: {description}", command=command, cwd=str(cwd) if cwd else None)
    start = time.perf_counter()

    result = subprocess.run(
        command,
        shell=True,
        check=False,
        capture_output=True,
        text=True,
        cwd=cwd,
        env=env,
    )

    duration_ms = (time.perf_counter() - start) * 1000
    if result.returncode == 0:
        logger.info(f"{description} completed", returncode=result.returncode)
        if result.stdout:
            logger.debug(f"{description} output", stdout=result.stdout)
    else:
        logger.error(
            f"{description} failed",
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    log_performance(description, duration_ms, returncode=result.returncode)

    return StageResult(
        name=description,
        command=command,
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
        duration_ms=duration_ms,
    )


class Pipeline:
    """Ordered list of stages with fail-fast semantics."""

    def __init__(self, stages: Sequence[Stage], env: Optional[Dict[str, str]] = None):
        self.stages = list(stages)
        self.env = env

    def run(self) -> List[StageResult]:
        """Run every stage in order.

        Raises ``PipelineStageError`` carrying the results so far when a
        stage fails.
        """
        env = dict(os.environ if self.env is None else self.env)
        env.setdefault("PYTHONUNBUFFERED", "1")

        results: List[StageResult] = []
        for stage in self.stages:
            if stage.fresh_dir is not None and stage.fresh_dir.exists():
                logger.info("Removing previous stage output", stage=stage.name, path=str(stage.fresh_dir))
                shutil.rmtree(stage.fresh_dir)
            result = run_command(stage.command, stage.name, cwd=stage.cwd, env=env)
            results.append(result)
            if not result.ok:
                skipped = [s.name for s in self.stages[len(results):]]
                logger.error("Pipeline aborted", stage=stage.name, skipped=skipped)
                raise PipelineStageError(stage.name, result.returncode, results)

        logger.info("Pipeline completed", stages=[r.name for r in results])
        return results


def build_default_pipeline(config: Optional[PipelineConfig] = None) -> Pipeline:
    """Checkout the configured repository, install it, run the named test class."""
    config = config or PipelineConfig()
    if not config.pipeline_repo_url:
        raise ConfigurationError("pipeline_repo_url must be set to run the checkout stage")

    workdir = Path(config.pipeline_workdir).resolve()
    cwd = Path.cwd().resolve()
    if workdir == cwd or workdir in cwd.parents:
        raise ConfigurationError(f"pipeline_workdir {workdir} would delete the current directory on checkout")
    python = shlex.quote(sys.executable)

    clone = ["git", "clone", "--depth", "1"]
    if config.pipeline_branch:
        clone += ["--branch", config.pipeline_branch]
    clone += [config.pipeline_repo_url, str(workdir)]

    build_command = config.pipeline_build_command or f"{python} -m pip install ."
    test_command = f"{python} -m pytest {shlex.quote(config.pipeline_test_target)} -v --tb=short"

    return Pipeline([
        Stage("checkout", " ".join(shlex.quote(part) for part in clone), fresh_dir=workdir),
        Stage("build", build_command, cwd=workdir),
        Stage("test", test_command, cwd=workdir),
    ])

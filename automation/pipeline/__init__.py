"""Ordered, fail-fast checkout/build/test pipeline."""

from .runner import Pipeline, Stage, StageResult, build_default_pipeline, run_command

__all__ = ["Pipeline", "Stage", "StageResult", "build_default_pipeline", "run_command"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Operations behind each devqa command.

Every operation runs exactly one wrapped tool synchronously and returns the
exit status the wrapper should report. Only the style check suppresses the
tool's status; everything else propagates it unchanged.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from dataclasses import dataclass

from ..constants import COVERAGE_REPORT, JUNIT_REPORT, REPORT_DIR
from ..process import ExitCodePolicy, ToolResult, run_tool
from ..report import ReportSummary, summarize_report
from ..tools import ToolKind, build_command
from .rendering import render_report_summary
from .shared import CLIError, RunContext


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Result of one operation, as seen by the wrapper."""

    kind: ToolKind
    result: ToolResult
    exit_code: int
    summary: ReportSummary | None = None


@dataclass(frozen=True, slots=True)
class CompositeOutcome:
    """Ordered step outcomes of the ``all`` command."""

    steps: tuple[StepOutcome, ...]

    @property
    def exit_code(self) -> int:
        """Return the exit status of the last step that ran."""

        return self.steps[-1].exit_code if self.steps else 0


def _execute(
    kind: ToolKind,
    context: RunContext,
    paths: Sequence[str],
    *,
    policy: ExitCodePolicy,
    capture: bool = False,
    level: str | None = None,
) -> tuple[ToolResult, int]:
    try:
        command = build_command(kind, context.config, paths, level=level)
    except ValueError as exc:
        raise CLIError(str(exc), exit_code=2) from exc
    logger = context.logger
    logger.section(kind.label)
    logger.debug(f'command="{shlex.join(command)}" cwd={context.root}')
    result = run_tool(command, capture=capture, cwd=context.root)
    if not capture and result.stderr:
        logger.fail(result.stderr)
    return result, result.effective_exit_code(policy)


def sniff(context: RunContext, paths: Sequence[str] = ()) -> StepOutcome:
    """Run the style checker, echo its report and print the summary banner.

    The checker's own exit status is discarded so the summary is the only
    verdict; the returned exit code is always ``0``.
    """

    result, exit_code = _execute(ToolKind.SNIFF, context, paths, policy=ExitCodePolicy.SUPPRESS, capture=True)
    output = result.output
    if output.strip():
        context.logger.echo(output.rstrip("\n"))
    summary = summarize_report(output)
    context.logger.debug(
        f"errors={summary.error_count} warnings={summary.warning_count} status={summary.status.value}",
    )
    render_report_summary(summary, logger=context.logger)
    return StepOutcome(kind=ToolKind.SNIFF, result=result, exit_code=exit_code, summary=summary)


def sniff_fix(context: RunContext, paths: Sequence[str] = ()) -> StepOutcome:
    """Run the style auto-fixer."""

    result, exit_code = _execute(ToolKind.SNIFF_FIX, context, paths, policy=ExitCodePolicy.PROPAGATE)
    return StepOutcome(kind=ToolKind.SNIFF_FIX, result=result, exit_code=exit_code)


def analyze(context: RunContext, paths: Sequence[str] = (), *, level: str | None = None) -> StepOutcome:
    """Run the static analyzer at ``level`` (or the configured level)."""

    result, exit_code = _execute(ToolKind.ANALYZE, context, paths, policy=ExitCodePolicy.PROPAGATE, level=level)
    return StepOutcome(kind=ToolKind.ANALYZE, result=result, exit_code=exit_code)


def test(context: RunContext, paths: Sequence[str] = ()) -> StepOutcome:
    """Run the test suite."""

    result, exit_code = _execute(ToolKind.TEST, context, paths, policy=ExitCodePolicy.PROPAGATE)
    return StepOutcome(kind=ToolKind.TEST, result=result, exit_code=exit_code)


def test_coverage(context: RunContext, paths: Sequence[str] = ()) -> StepOutcome:
    """Run the test suite writing coverage and JUnit reports under ``build/logs``."""

    report_dir = context.root / REPORT_DIR
    report_dir.mkdir(parents=True, exist_ok=True)
    result, exit_code = _execute(ToolKind.TEST_COVERAGE, context, paths, policy=ExitCodePolicy.PROPAGATE)
    context.logger.info(f"Coverage report: {COVERAGE_REPORT}  Test results: {JUNIT_REPORT}")
    return StepOutcome(kind=ToolKind.TEST_COVERAGE, result=result, exit_code=exit_code)


def run_all(context: RunContext, paths: Sequence[str] = ()) -> CompositeOutcome:
    """Run style check, static analysis and coverage tests, in that order.

    Every step runs regardless of how the previous one ended; the composite
    exit status is the status of the final step.
    """

    steps = (
        sniff(context, paths),
        analyze(context, paths),
        test_coverage(context, paths),
    )
    return CompositeOutcome(steps=steps)


__all__ = [
    "CompositeOutcome",
    "StepOutcome",
    "analyze",
    "run_all",
    "sniff",
    "sniff_fix",
    "test",
    "test_coverage",
]

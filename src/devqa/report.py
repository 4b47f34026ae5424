# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Summarise the style checker's plain-text report into error and warning totals.

The style checker prints one summary line per offending file, for example::

    FILE: src/Controller.php
    ----------------------------------------------------------------------
    FOUND 3 ERRORS AND 1 WARNING AFFECTING 4 LINES
    ----------------------------------------------------------------------

Only lines carrying the report marker (``FOUND``) are considered; the detail
rows beneath them are ignored. The counts preceding the error and warning
tokens are summed independently across all summary lines.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final


@dataclass(frozen=True, slots=True)
class ReportFormat:
    """Describe how summary lines and their counts are recognised."""

    marker: str
    error_pattern: re.Pattern[str]
    warning_pattern: re.Pattern[str]

    def summary_lines(self, text: str) -> list[str]:
        """Return the lines of ``text`` that contain the report marker."""

        return [line for line in text.splitlines() if self.marker in line]


PHPCS_REPORT_FORMAT: Final[ReportFormat] = ReportFormat(
    marker="FOUND",
    error_pattern=re.compile(r"(\d+)\s+ERRORS?\b", re.IGNORECASE),
    warning_pattern=re.compile(r"(\d+)\s+WARN(?:ING)?S?\b", re.IGNORECASE),
)


class SummaryStatus(str, Enum):
    """Overall classification of a style check run."""

    EMPTY = "empty"
    SUCCESS = "success"
    WARNINGS = "warnings"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class ReportSummary:
    """Error and warning totals extracted from a report."""

    error_count: int = 0
    warning_count: int = 0
    summary_lines: tuple[str, ...] = ()

    @property
    def status(self) -> SummaryStatus:
        """Return the classification used to pick the summary banner."""

        if not self.summary_lines:
            return SummaryStatus.EMPTY
        if self.error_count == 0 and self.warning_count == 0:
            return SummaryStatus.SUCCESS
        if self.error_count == 0:
            return SummaryStatus.WARNINGS
        return SummaryStatus.FAILURE


def extract_counts(lines: Iterable[str], pattern: re.Pattern[str]) -> list[int]:
    """Return every integer captured by ``pattern`` across ``lines``.

    Args:
        lines: Summary lines to scan.
        pattern: Compiled pattern whose first group captures the count.

    Returns:
        list[int]: Captured counts in the order they appear.
    """

    counts: list[int] = []
    for line in lines:
        counts.extend(int(match.group(1)) for match in pattern.finditer(line))
    return counts


def summarize_report(text: str, report_format: ReportFormat = PHPCS_REPORT_FORMAT) -> ReportSummary:
    """Return the error and warning totals found in ``text``.

    Args:
        text: Raw report emitted by the style checker; may be empty.
        report_format: Marker and count patterns describing the report layout.

    Returns:
        ReportSummary: Summed totals plus the summary lines they came from.
    """

    lines: Sequence[str] = report_format.summary_lines(text)
    errors = extract_counts(lines, report_format.error_pattern)
    warnings = extract_counts(lines, report_format.warning_pattern)
    return ReportSummary(
        error_count=sum(errors),
        warning_count=sum(warnings),
        summary_lines=tuple(lines),
    )


__all__ = [
    "PHPCS_REPORT_FORMAT",
    "ReportFormat",
    "ReportSummary",
    "SummaryStatus",
    "extract_counts",
    "summarize_report",
]

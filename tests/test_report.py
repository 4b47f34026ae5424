# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the style report summarizer."""

from __future__ import annotations

import re

import pytest

from devqa.report import ReportFormat, ReportSummary, SummaryStatus, extract_counts, summarize_report

PHPCS_FULL_REPORT = """
FILE: /app/src/Controller.php
----------------------------------------------------------------------
FOUND 3 ERRORS AND 1 WARNING AFFECTING 4 LINES
----------------------------------------------------------------------
  12 | ERROR   | [x] Expected 1 space after FUNCTION keyword; 0 found
  14 | ERROR   | [ ] Missing doc comment for function index()
  20 | WARNING | [ ] Line exceeds 120 characters; contains 131 characters
  31 | ERROR   | [x] Whitespace found at end of line
----------------------------------------------------------------------

FILE: /app/tests/ControllerTest.php
----------------------------------------------------------------------
FOUND 0 ERRORS AND 2 WARNINGS AFFECTING 2 LINES
----------------------------------------------------------------------
  8 | WARNING | [ ] Line exceeds 120 characters; contains 125 characters
  9 | WARNING | [ ] Line exceeds 120 characters; contains 140 characters
----------------------------------------------------------------------
"""


def test_errors_and_warnings_are_summed_across_files() -> None:
    summary = summarize_report("a.php FOUND 2 ERRORS\nb.php FOUND 3 ERRORS AND 1 WARNING\n")

    assert summary.error_count == 5
    assert summary.warning_count == 1
    assert summary.status is SummaryStatus.FAILURE


def test_warnings_only_report() -> None:
    summary = summarize_report("a.php FOUND 0 ERRORS AND 4 WARNINGS")

    assert (summary.error_count, summary.warning_count) == (0, 4)
    assert summary.status is SummaryStatus.WARNINGS


def test_clean_report_is_success() -> None:
    summary = summarize_report("a.php FOUND 0 ERRORS AND 0 WARNINGS")

    assert (summary.error_count, summary.warning_count) == (0, 0)
    assert summary.status is SummaryStatus.SUCCESS


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\n\n",
        "Time: 85ms; Memory: 6MB\n",
        "  12 | ERROR   | [x] Expected 1 space after FUNCTION keyword; 0 found\n",
    ],
)
def test_reports_without_summary_lines_print_no_banner(text: str) -> None:
    summary = summarize_report(text)

    assert summary == ReportSummary()
    assert summary.status is SummaryStatus.EMPTY


def test_detail_lines_are_ignored_in_full_report() -> None:
    summary = summarize_report(PHPCS_FULL_REPORT)

    assert summary.error_count == 3
    assert summary.warning_count == 3
    assert len(summary.summary_lines) == 2


def test_singular_tokens_are_counted() -> None:
    summary = summarize_report("FOUND 1 ERROR AND 1 WARNING AFFECTING 1 LINE")

    assert (summary.error_count, summary.warning_count) == (1, 1)


def test_warning_count_does_not_leak_into_errors() -> None:
    summary = summarize_report("x.php FOUND 7 WARNINGS")

    assert summary.error_count == 0
    assert summary.warning_count == 7
    assert summary.status is SummaryStatus.WARNINGS


def test_custom_report_format() -> None:
    report_format = ReportFormat(
        marker="Summary:",
        error_pattern=re.compile(r"(\d+)\s+problems?"),
        warning_pattern=re.compile(r"(\d+)\s+notices?"),
    )

    summary = summarize_report("Summary: 2 problems, 5 notices\nFOUND 9 ERRORS", report_format)

    assert (summary.error_count, summary.warning_count) == (2, 5)


def test_extract_counts_collects_every_match() -> None:
    pattern = re.compile(r"(\d+)\s+ERRORS?")

    assert extract_counts(["FOUND 2 ERRORS", "no counts", "FOUND 10 ERRORS"], pattern) == [2, 10]

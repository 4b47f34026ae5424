# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the style check summary banner."""

from __future__ import annotations

from typing import Final

from rich.text import Text

from ..report import ReportSummary, SummaryStatus
from .shared import CLILogger

_BANNERS: Final[dict[SummaryStatus, tuple[str, str, str]]] = {
    SummaryStatus.SUCCESS: ("✅ ", "CODE STYLE CHECK PASSED", "bold white on green"),
    SummaryStatus.WARNINGS: ("⚠️ ", "CODE STYLE CHECK PASSED WITH WARNINGS", "bold black on yellow"),
    SummaryStatus.FAILURE: ("❌ ", "CODE STYLE CHECK FAILED", "bold white on red"),
}

_TOTAL_STYLES: Final[dict[SummaryStatus, tuple[str, str]]] = {
    SummaryStatus.SUCCESS: ("green", "green"),
    SummaryStatus.WARNINGS: ("green", "yellow"),
    SummaryStatus.FAILURE: ("red", "yellow"),
}


def build_summary_banner(summary: ReportSummary, *, use_emoji: bool) -> Text | None:
    """Return the banner text for ``summary`` or ``None`` when nothing was reported.

    Args:
        summary: Totals extracted from the style checker report.
        use_emoji: Whether the banner may include an emoji glyph.

    Returns:
        Text | None: Styled banner plus totals line, or ``None`` for an empty report.
    """

    status = summary.status
    if status is SummaryStatus.EMPTY:
        return None
    glyph, title, style = _BANNERS[status]
    error_style, warning_style = _TOTAL_STYLES[status]
    text = Text()
    text.append(f" {glyph if use_emoji else ''}{title} ", style=style)
    text.append("\n")
    text.append("Errors: ", style="bold")
    text.append(str(summary.error_count), style=error_style)
    text.append("  ")
    text.append("Warnings: ", style="bold")
    text.append(str(summary.warning_count), style=warning_style)
    return text


def render_report_summary(summary: ReportSummary, *, logger: CLILogger) -> bool:
    """Print the summary banner for ``summary``.

    Args:
        summary: Totals extracted from the style checker report.
        logger: CLI logger bound to the invocation console.

    Returns:
        bool: ``True`` when a banner was printed.
    """

    banner = build_summary_banner(summary, use_emoji=logger.use_emoji)
    if banner is None:
        logger.debug(f"summary=empty lines={len(summary.summary_lines)}")
        return False
    logger.echo("")
    logger.print(banner)
    return True


__all__ = ["build_summary_banner", "render_report_summary"]

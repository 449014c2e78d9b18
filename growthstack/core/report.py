"""Plain-text (CSV-style) investment report."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List

from growthstack.models import CalculationResult

DEFAULT_TITLE = "GrowthStack Investment Report"
SEPARATOR = ","

SUMMARY_HEADER = ("Total Invested", "Total Wealth", "Total Real Wealth", "Total Gain")
GOAL_HEADER = ("Year", "Month")
YEARLY_HEADER = ("Year", "Invested Amount", "Interest Earned", "Total Value", "Real Value")
MONTHLY_HEADER = (
    "Month",
    "Year",
    "Monthly Installment",
    "Total Invested",
    "Total Value",
    "Real Value",
)


class ReportFormatError(ValueError):
    pass


def round_half_up(value: float) -> int:
    """Nearest integer, halves toward +inf (so -2.5 -> -2, 2.5 -> 3)."""
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def _cell(value: float) -> object:
    # overflowed projections keep their inf/nan spelled out
    if not math.isfinite(value):
        return "nan" if math.isnan(value) else ("inf" if value > 0 else "-inf")
    return round_half_up(value)


def _row(cells: Iterable[object]) -> str:
    return SEPARATOR.join(str(cell) for cell in cells)


def _section(title: str, header: Iterable[str], rows: Iterable[Iterable[object]]) -> List[str]:
    return [title, _row(header), *(_row(cells) for cells in rows)]


def to_report(result: CalculationResult, title: str = DEFAULT_TITLE) -> str:
    """
    Render ``result`` as text sections separated by a blank line:
    title, SUMMARY, optional GOAL ACHIEVED, YEARLY BREAKDOWN, MONTHLY BREAKDOWN.

    Values are rounded here only; ``result`` keeps full precision. Non-finite
    values (an overflowed projection) render as ``inf``, ``-inf`` or ``nan``.
    """
    sections: List[List[str]] = [[title]]

    sections.append(
        _section(
            "SUMMARY",
            SUMMARY_HEADER,
            [
                (
                    _cell(result.totalInvested),
                    _cell(result.totalWealth),
                    _cell(result.totalRealWealth),
                    _cell(result.totalGain),
                )
            ],
        )
    )

    goal = result.goalAchievedMonth
    if goal is not None:
        sections.append(_section("GOAL ACHIEVED", GOAL_HEADER, [(goal.year, goal.month)]))

    sections.append(
        _section(
            "YEARLY BREAKDOWN",
            YEARLY_HEADER,
            (
                (
                    row.year,
                    _cell(row.investedAmount),
                    _cell(row.interestEarned),
                    _cell(row.totalValue),
                    _cell(row.realValue),
                )
                for row in result.yearlyBreakdown
            ),
        )
    )

    sections.append(
        _section(
            "MONTHLY BREAKDOWN",
            MONTHLY_HEADER,
            (
                (
                    row.monthIndex,
                    row.year,
                    _cell(row.installment),
                    _cell(row.invested),
                    _cell(row.value),
                    _cell(row.realValue),
                )
                for row in result.monthlyData
            ),
        )
    )

    return "\n\n".join("\n".join(lines) for lines in sections) + "\n"


def parse_summary(report: str) -> Dict[str, int]:
    """Read the SUMMARY row of a report back into {header: integer}."""
    lines = report.splitlines()
    try:
        start = lines.index("SUMMARY")
        header = lines[start + 1].split(SEPARATOR)
        values = lines[start + 2].split(SEPARATOR)
    except (ValueError, IndexError) as exc:
        raise ReportFormatError("report has no complete SUMMARY section") from exc

    if tuple(header) != SUMMARY_HEADER or len(values) != len(header):
        raise ReportFormatError(f"unexpected SUMMARY layout: {lines[start + 1]!r}")
    try:
        return {name: int(value) for name, value in zip(header, values)}
    except ValueError as exc:
        raise ReportFormatError(f"non-integer SUMMARY cell in {lines[start + 2]!r}") from exc


__all__ = [
    "DEFAULT_TITLE",
    "ReportFormatError",
    "parse_summary",
    "round_half_up",
    "to_report",
]

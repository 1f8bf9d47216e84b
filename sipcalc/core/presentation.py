"""Display-ready views of a projection: currency strings, summary cards, chart series."""

from __future__ import annotations

import math
from typing import List

from sipcalc.schemas.projection import (
    ChartDataset,
    ChartSeries,
    ProjectionResult,
    SummaryCard,
)

CURRENCY_SYMBOL = "₹"


def round_amount(value: float) -> int:
    """Nearest whole unit, halves rounded up (-2.5 -> -2)."""
    return math.floor(value + 0.5)


def group_indian(digits: str) -> str:
    """'1234567' -> '12,34,567' (last three digits, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(value: float) -> str:
    amount = round_amount(value)
    sign = "-" if amount < 0 else ""
    return f"{CURRENCY_SYMBOL}{sign}{group_indian(str(abs(amount)))}"


def summary_cards(result: ProjectionResult) -> List[SummaryCard]:
    cards = [
        ("Total Investment", result.total_contributed, "Amount you invest"),
        ("Expected Returns", result.gross_returns, "Value before tax and inflation"),
        ("Post-tax Returns", result.post_tax_returns, "Value after capital gains tax"),
        ("Inflation-adjusted Value", result.real_returns, "Post-tax value in today's money"),
    ]
    return [
        SummaryCard(title=title, value=value, formatted=format_currency(value), subtitle=subtitle)
        for title, value, subtitle in cards
    ]


def chart_series(result: ProjectionResult) -> ChartSeries:
    """One point per year for each of the four value series."""
    timeline = result.timeline
    return ChartSeries(
        labels=[f"Year {entry.year}" for entry in timeline],
        datasets=[
            ChartDataset(
                label="Total Investment",
                data=[round_amount(entry.contributed_amount) for entry in timeline],
            ),
            ChartDataset(
                label="Expected Value",
                data=[round_amount(entry.gross_value) for entry in timeline],
            ),
            ChartDataset(
                label="Post-tax Value",
                data=[round_amount(entry.post_tax_value) for entry in timeline],
            ),
            ChartDataset(
                label="Inflation-adjusted Value",
                data=[round_amount(entry.real_value) for entry in timeline],
            ),
        ],
    )

from __future__ import annotations

import math
from typing import List

from sipcalc.schemas.projection import (
    InvestmentPlan,
    ProjectionResult,
    YearlyProjection,
)

MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate_percent: float) -> float:
    """Percent per year -> decimal rate per month."""
    return (annual_rate_percent / 100) / MONTHS_PER_YEAR


def annual_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100


def periodic_future_value(amount: float, rate_per_month: float, months: int) -> float:
    """
    Future value of `amount` paid every month for `months` months.

    Uses the annuity-due form  amount * (((1 + r)^n - 1) * (1 + r)) / r.
    A zero rate has no growth, so the value is just the sum of the payments.
    Growth too large for a float gives an infinite value.
    """
    if amount == 0:
        return 0.0
    if rate_per_month == 0:
        return amount * months
    try:
        growth = (1 + rate_per_month) ** months
    except OverflowError:
        return math.inf
    return amount * ((growth - 1) * (1 + rate_per_month)) / rate_per_month


def lump_sum_future_value(amount: float, rate_per_year: float, years: int) -> float:
    """Annual compounding of a single contribution made at time zero."""
    try:
        growth = (1 + rate_per_year) ** years
    except OverflowError:
        return math.inf if amount > 0 else 0.0
    return amount * growth


def contributed_principal(plan: InvestmentPlan, months: int) -> float:
    # the one-time amount counts in full from the first year onward
    return plan.periodic_amount * months + plan.one_time_amount


def tax_on_gains(
    gross_value: float,
    contributed: float,
    tax_rate_percent: float,
    clamp_gains_at_zero: bool = False,
) -> float:
    """
    Flat tax on (gross_value - contributed).

    Negative gains are taxed too unless `clamp_gains_at_zero` is set, which
    turns a loss into a rebate that raises the post-tax value above gross.
    """
    gains = gross_value - contributed
    if clamp_gains_at_zero and gains < 0:
        gains = 0.0
    return gains * (tax_rate_percent / 100)


def discount_for_inflation(value: float, inflation_rate_percent: float, years: int) -> float:
    """Express `value` in today's purchasing power after `years` years of inflation."""
    return value * (1 + inflation_rate_percent / 100) ** (-years)


def project_year(
    plan: InvestmentPlan,
    year: int,
    clamp_gains_at_zero: bool = False,
) -> YearlyProjection:
    """Value of the plan at the end of `year` (1-based)."""
    months = year * MONTHS_PER_YEAR

    gross = periodic_future_value(
        plan.periodic_amount, monthly_rate(plan.annual_return_rate_percent), months
    ) + lump_sum_future_value(
        plan.one_time_amount, annual_rate(plan.annual_return_rate_percent), year
    )
    contributed = contributed_principal(plan, months)

    tax = tax_on_gains(
        gross,
        contributed,
        plan.capital_gains_tax_rate_percent,
        clamp_gains_at_zero=clamp_gains_at_zero,
    )
    # an overflowed value stays infinite instead of becoming inf - inf
    post_tax = gross - tax if math.isfinite(gross) else gross

    return YearlyProjection(
        year=year,
        contributed_amount=contributed,
        gross_value=gross,
        post_tax_value=post_tax,
        real_value=discount_for_inflation(
            post_tax, plan.annual_inflation_rate_percent, year
        ),
    )


def compute_projection(
    plan: InvestmentPlan,
    clamp_gains_at_zero: bool = False,
) -> ProjectionResult:
    """
    Project a SIP and/or lumpsum plan year by year.

    Conventions:
      - SIP leg: monthly contributions compounded monthly (annuity-due form).
      - Lumpsum leg: one contribution at time zero compounded annually.
      - Both legs are summed, so a plan with both amounts set is a combined plan.
      - Tax is charged on gains at each year boundary; real values are
        discounted by inflation over that entry's own number of years.
      - Headline totals are the final timeline entry.

    The plan is trusted as given: range clamping and zeroing of the inactive
    leg happen upstream (see sipcalc.core.constraints.prepare_plan).
    """
    timeline: List[YearlyProjection] = [
        project_year(plan, year, clamp_gains_at_zero=clamp_gains_at_zero)
        for year in range(1, plan.duration_years + 1)
    ]

    final = timeline[-1]
    return ProjectionResult(
        total_contributed=final.contributed_amount,
        gross_returns=final.gross_value,
        post_tax_returns=final.post_tax_value,
        real_returns=final.real_value,
        timeline=timeline,
    )


__all__ = [
    "MONTHS_PER_YEAR",
    "monthly_rate",
    "annual_rate",
    "periodic_future_value",
    "lump_sum_future_value",
    "contributed_principal",
    "tax_on_gains",
    "discount_for_inflation",
    "project_year",
    "compute_projection",
]

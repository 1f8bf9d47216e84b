"""Input ranges, defaults, and the plan preparation done before projecting."""

from __future__ import annotations

import logging
from typing import Dict

from sipcalc.schemas.projection import Bound, InvestmentPlan, InvestmentType

logger = logging.getLogger(__name__)


INPUT_CONSTRAINTS: Dict[str, Bound] = {
    "periodic_amount": Bound(min=100, max=1_000_000),
    "one_time_amount": Bound(min=1_000, max=100_000_000),
    "duration_years": Bound(min=1, max=40),
    "annual_return_rate_percent": Bound(min=1, max=30),
    "capital_gains_tax_rate_percent": Bound(min=0, max=40),
    "annual_inflation_rate_percent": Bound(min=0, max=20),
}

DEFAULT_PLAN = InvestmentPlan(
    investment_type=InvestmentType.SIP,
    periodic_amount=5000,
    one_time_amount=100000,
    duration_years=10,
    annual_return_rate_percent=12,
    annual_inflation_rate_percent=5,
    capital_gains_tax_rate_percent=12.5,
)


def clamp(value: float, bound: Bound) -> float:
    return min(max(value, bound.min), bound.max)


def apply_investment_type(plan: InvestmentPlan) -> InvestmentPlan:
    """Zero the contribution leg that the selected investment type leaves inactive."""
    if plan.investment_type == InvestmentType.SIP:
        return plan.model_copy(update={"one_time_amount": 0.0})
    return plan.model_copy(update={"periodic_amount": 0.0})


def clamp_plan(plan: InvestmentPlan) -> InvestmentPlan:
    """
    Pull every field of `plan` into its allowed range.

    A contribution amount of exactly zero is an inactive leg and stays zero.
    """
    updates: Dict[str, float] = {}
    for field, bound in INPUT_CONSTRAINTS.items():
        value = getattr(plan, field)
        if field in ("periodic_amount", "one_time_amount") and value == 0:
            continue
        clamped = clamp(value, bound)
        if clamped != value:
            logger.debug("clamped %s from %s to %s", field, value, clamped)
            updates[field] = clamped

    if "duration_years" in updates:
        updates["duration_years"] = int(updates["duration_years"])
    return plan.model_copy(update=updates)


def prepare_plan(plan: InvestmentPlan, clamp_inputs: bool = True) -> InvestmentPlan:
    prepared = apply_investment_type(plan)
    if clamp_inputs:
        prepared = clamp_plan(prepared)
    return prepared


__all__ = [
    "Bound",
    "INPUT_CONSTRAINTS",
    "DEFAULT_PLAN",
    "clamp",
    "apply_investment_type",
    "clamp_plan",
    "prepare_plan",
]

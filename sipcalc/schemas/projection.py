"""Data contracts for SIP / lumpsum projections."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_AMOUNT = 1_000_000_000_000
MAX_DURATION_YEARS = 100
MAX_RATE_PERCENT = 100


class InvestmentType(str, Enum):
    SIP = "sip"
    LUMPSUM = "lumpsum"


class InvestmentPlan(BaseModel):
    """Inputs required to project an investment."""

    model_config = ConfigDict(allow_inf_nan=False)

    investment_type: InvestmentType = Field(
        InvestmentType.SIP,
        description="Which contribution leg the caller considers active.",
    )
    periodic_amount: float = Field(
        0.0,
        ge=0,
        description="Contribution added at the end of each month.",
    )
    one_time_amount: float = Field(
        0.0,
        ge=0,
        description="Single contribution made at time zero.",
    )
    duration_years: int = Field(..., ge=1, description="Number of whole years to project.")
    annual_return_rate_percent: float = Field(
        ...,
        ge=0,
        description="Expected nominal annual return as a percentage (e.g. 12 for 12%).",
    )
    annual_inflation_rate_percent: float = Field(
        0.0,
        ge=0,
        description="Expected annual inflation as a percentage.",
    )
    capital_gains_tax_rate_percent: float = Field(
        0.0,
        ge=0,
        description="Flat tax applied to gains (value minus contributions) as a percentage.",
    )


class ProjectionRequest(InvestmentPlan):
    """Plan payload accepted by the HTTP API."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    # hard ceilings, applied even when slider clamping is switched off
    periodic_amount: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    one_time_amount: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    duration_years: int = Field(..., ge=1, le=MAX_DURATION_YEARS)
    annual_return_rate_percent: float = Field(..., ge=0, le=MAX_RATE_PERCENT)
    annual_inflation_rate_percent: float = Field(0.0, ge=0, le=MAX_RATE_PERCENT)
    capital_gains_tax_rate_percent: float = Field(0.0, ge=0, le=MAX_RATE_PERCENT)

    clamp_gains_at_zero: Optional[bool] = Field(
        None,
        description="Skip tax on negative gains; falls back to the app setting when omitted.",
    )

    def to_plan(self) -> InvestmentPlan:
        return InvestmentPlan.model_validate(
            self.model_dump(exclude={"clamp_gains_at_zero"})
        )


class YearlyProjection(BaseModel):
    """Single year of a projection timeline."""

    year: int = Field(..., ge=1)
    contributed_amount: float
    gross_value: float
    post_tax_value: float
    real_value: float


class ProjectionResult(BaseModel):
    """Headline totals plus the year-by-year timeline."""

    total_contributed: float
    gross_returns: float
    post_tax_returns: float
    real_returns: float
    timeline: List[YearlyProjection]


class Bound(BaseModel):
    """Inclusive range an input field is clamped into."""

    min: float
    max: float


class DefaultsResponse(BaseModel):
    plan: InvestmentPlan
    constraints: Dict[str, Bound]


class SummaryCard(BaseModel):
    title: str
    value: float
    formatted: str
    subtitle: str


class ChartDataset(BaseModel):
    label: str
    data: List[int]


class ChartSeries(BaseModel):
    """Year labels plus one rounded dataset per value series."""

    labels: List[str]
    datasets: List[ChartDataset]


class ChartResponse(BaseModel):
    cards: List[SummaryCard]
    chart: ChartSeries

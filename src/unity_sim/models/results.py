"""Result types — the contract between engine, finance, and API.

Every result is a value object rebuilt from scratch for each request; nothing
here is mutated after construction.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════
# Monthly projection
# ═══════════════════════════════════════════════════════════════════════════

class MonthlyProjection(BaseModel):
    """One simulated month."""

    model_config = ConfigDict(frozen=True)

    month: int
    """0-based month index."""

    self_run_activation: float
    """Fraction of self-run licenses in service (0–1), from the ramp-up curve."""
    leased_activation: float
    """Fraction of leased licenses in service (0–1)."""

    effective_self_run: float
    """self-run licenses × activation × uptime — licenses actually earning."""
    effective_leased: float
    """leased licenses × activation × uptime."""

    revenue: float

    hardware_cost: float
    """Phone cost expensed this month (new activations, optionally amortized)."""
    sim_cost: float
    credit_cost: float
    node_cost: float
    """Node purchase — non-zero in month 0 only."""

    total_cost: float
    """hardware + SIM + credit. Node cost is capital and sits outside profit."""
    profit: float
    """revenue − total_cost."""
    cumulative_cash_flow: float
    """Running total since month 0, starting from −node cost."""


# ═══════════════════════════════════════════════════════════════════════════
# Financial summary
# ═══════════════════════════════════════════════════════════════════════════

RoiStatus = Literal["defined", "insufficient_horizon", "no_investment"]


class RoiFigure(BaseModel):
    """Cumulative ROI at a fixed month, or an explicit reason it is undefined."""

    model_config = ConfigDict(frozen=True)

    months: int
    """ROI window (12 or 24)."""
    status: RoiStatus
    value: float | None = None
    """cumulative[months − 1] / initial_investment as a fraction. None unless status='defined'."""

    @property
    def is_defined(self) -> bool:
        return self.status == "defined"


class FinancialSummary(BaseModel):
    """Break-even and ROI derived from an already-simulated series."""

    model_config = ConfigDict(frozen=True)

    horizon_months: int
    initial_investment: float
    """Node capex + phone capex for self-run licenses."""

    break_even_month: int | None
    """First month index with cumulative cash flow ≥ 0. None = not reached within horizon."""

    roi_12_month: RoiFigure
    roi_24_month: RoiFigure

    total_revenue: float
    total_cost: float
    final_cumulative_cash_flow: float
    final_monthly_revenue: float
    """Revenue in the last simulated month."""

    cumulative_cash_flow: list[float]
    """The cumulative cash-flow curve, one point per month."""

    series: list[MonthlyProjection]

    @property
    def break_even_reached(self) -> bool:
        return self.break_even_month is not None


class ProjectionResult(BaseModel):
    """Output of ``run_projection``."""

    model_config = ConfigDict(frozen=True)

    series: list[MonthlyProjection]
    summary: FinancialSummary


# ═══════════════════════════════════════════════════════════════════════════
# Steady state (fully ramped, single-month view)
# ═══════════════════════════════════════════════════════════════════════════

class SteadyStateMetrics(BaseModel):
    """Fully-activated monthly economics — no ramp-up, no amortization."""

    model_config = ConfigDict(frozen=True)

    monthly_revenue: float
    revenue_self_run: float
    revenue_leased: float
    monthly_sim_cost: float
    monthly_credit_cost: float
    monthly_cost: float
    net_monthly_profit: float
    annual_profit: float
    initial_investment: float
    payback_months: float | None
    """initial_investment / net_monthly_profit. None if the operation never pays back."""
    roi_12_month_pct: float | None
    roi_24_month_pct: float | None


# ═══════════════════════════════════════════════════════════════════════════
# Ecosystem reality check
# ═══════════════════════════════════════════════════════════════════════════

class Severity(str, Enum):
    INFO = "info"
    CAUTION = "caution"
    WARNING = "warning"
    ALERT = "alert"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.INFO: 0,
    Severity.CAUTION: 1,
    Severity.WARNING: 2,
    Severity.ALERT: 3,
}


class RealityWarning(BaseModel):
    """One triggered reality-check rule."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    code: str
    message: str
    value: float | None = None
    """The measured quantity that tripped the rule."""


class UserShare(BaseModel):
    """The user's position as a percentage of the ecosystem (realistic basis)."""

    model_config = ConfigDict(frozen=True)

    nodes_pct: float
    licenses_pct: float
    revenue_pct: float
    investment_pct: float


class VerificationVolume(BaseModel):
    """Plausibility heuristic — implied network actions, not a measurement."""

    model_config = ConfigDict(frozen=True)

    daily_per_license: float
    daily_ecosystem: float


class BenchmarkComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    reference_revenue_per_license: float
    ratio: float
    """scenario revenue per license / reference."""


class EcosystemReport(BaseModel):
    """Ecosystem-wide context for one scenario.

    ``theoretical_max_*`` and ``realistic_*`` revenue are deliberately separate
    fields; every share percentage is computed on the realistic basis.
    """

    model_config = ConfigDict(frozen=True)

    total_nodes: int
    total_licenses: int

    theoretical_max_monthly_revenue: float
    theoretical_max_annual_revenue: float
    realistic_monthly_revenue: float
    realistic_annual_revenue: float

    theoretical_capital_requirement: float
    """Every ecosystem node bought and every license fitted with a phone."""
    realistic_capital_requirement: float
    """Nodes plus phones for the assumed self-run fraction only."""

    user_monthly_revenue: float
    """User's fully-ramped monthly revenue on the realistic basis."""
    user_share: UserShare

    verification: VerificationVolume
    benchmarks: list[BenchmarkComparison]
    warnings: list[RealityWarning]
    """Ordered alert → warning → caution → info."""

    @property
    def highest_severity(self) -> Severity | None:
        return self.warnings[0].severity if self.warnings else None

    def has_warning(self, code: str) -> bool:
        return any(w.code == code for w in self.warnings)

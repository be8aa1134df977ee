"""Ecosystem reality-check assumptions and warning thresholds.

Every number the analyzer compares against lives here as a named field so a
caller can override it per request instead of editing the analysis logic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from unity_sim.config.distribution import DistributionConfig


class Benchmark(BaseModel):
    """A reference network's monthly revenue per device/license."""

    model_config = ConfigDict(frozen=True)

    name: str
    revenue_per_license: float = Field(gt=0, description="Monthly revenue per license/device (USD)")


DEFAULT_BENCHMARKS: tuple[Benchmark, ...] = (
    Benchmark(name="DePIN wireless hotspot", revenue_per_license=30.0),
    Benchmark(name="Bandwidth-sharing app", revenue_per_license=15.0),
    Benchmark(name="Compute-sharing node", revenue_per_license=60.0),
)


class EcosystemConfig(BaseModel):
    """Platform-wide constants and reality-check thresholds."""

    model_config = ConfigDict(frozen=True)

    # --- Ecosystem capacity ---
    total_nodes: int = Field(
        default=6_000, ge=1,
        description="Fixed platform-wide node supply, independent of the user's node count.",
    )
    assumed_distribution: DistributionConfig = Field(
        default_factory=lambda: DistributionConfig(self_run=0.25, leased=0.50, inactive=0.25),
        description="Average distribution assumed for the whole ecosystem when estimating "
                    "realistic revenue. Never the user's own distribution.",
    )

    # --- Verification volume heuristic ---
    revenue_per_verification: float = Field(
        default=0.05, gt=0,
        description="Assumed revenue earned per atomic network verification (USD).",
    )
    days_per_month: int = Field(default=30, ge=28, le=31)

    # --- Competitive benchmarks ---
    benchmarks: tuple[Benchmark, ...] = Field(default=DEFAULT_BENCHMARKS)

    # --- Warning thresholds ---
    revenue_per_license_alert: float = Field(
        default=500.0, ge=0,
        description="alert: monthly revenue per license above this is implausible.",
    )
    daily_verifications_alert: float = Field(
        default=400.0, ge=0,
        description="alert: implied daily verifications per license above this.",
    )
    market_concentration_pct: float = Field(
        default=1.0, ge=0, le=100,
        description="warning: user's share of realistic ecosystem revenue at or above this (%).",
    )
    ecosystem_capital_caution: float = Field(
        default=100_000_000.0, ge=0,
        description="caution: theoretical ecosystem capital requirement above this (USD).",
    )
    benchmark_multiple_caution: float = Field(
        default=5.0, gt=0,
        description="caution: revenue per license above this multiple of any benchmark.",
    )
    break_even_notice_months: int = Field(
        default=12, ge=0,
        description="info: break-even later than this month index.",
    )

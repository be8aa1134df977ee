"""Ecosystem reality check — one operator against the whole network.

Two ecosystem revenue figures are produced and never mixed:

  theoretical max = ecosystem licenses × revenue per license
  realistic       = same pool under the assumed average distribution, with
                    the scenario's lease split and uptime applied

Every "share" percentage divides a realistic user figure by a realistic
ecosystem figure.  The theoretical figures are for display and for the
capital-requirement check only.
"""

from __future__ import annotations

from unity_sim.config.ecosystem import EcosystemConfig
from unity_sim.config.scenario import ScenarioConfig
from unity_sim.finance.steady_state import realistic_monthly_revenue
from unity_sim.models.results import (
    BenchmarkComparison,
    EcosystemReport,
    FinancialSummary,
    RealityWarning,
    Severity,
    UserShare,
    VerificationVolume,
)

# Warning codes
REVENUE_PER_LICENSE_EXTREME = "REVENUE_PER_LICENSE_EXTREME"
VERIFICATION_VOLUME_EXTREME = "VERIFICATION_VOLUME_EXTREME"
MARKET_CONCENTRATION = "MARKET_CONCENTRATION"
ECOSYSTEM_CAPITAL_EXTREME = "ECOSYSTEM_CAPITAL_EXTREME"
BENCHMARK_OUTLIER = "BENCHMARK_OUTLIER"
LONG_BREAK_EVEN = "LONG_BREAK_EVEN"
BREAK_EVEN_NOT_REACHED = "BREAK_EVEN_NOT_REACHED"

SHARE_EPSILON = 1e-9
"""Float slack on inclusive percentage thresholds (1.0% must trip a 1.0% rule)."""


def _pct(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def compute_verification_volume(
    config: ScenarioConfig,
    ecosystem: EcosystemConfig,
    ecosystem_licenses: int,
) -> VerificationVolume:
    """Implied daily network actions from revenue per license."""
    daily_revenue = config.revenue.revenue_per_license / ecosystem.days_per_month
    per_license = daily_revenue / ecosystem.revenue_per_verification
    return VerificationVolume(
        daily_per_license=per_license,
        daily_ecosystem=per_license * ecosystem_licenses,
    )


def compare_benchmarks(config: ScenarioConfig, ecosystem: EcosystemConfig) -> list[BenchmarkComparison]:
    rpl = config.revenue.revenue_per_license
    return [
        BenchmarkComparison(
            name=b.name,
            reference_revenue_per_license=b.revenue_per_license,
            ratio=rpl / b.revenue_per_license,
        )
        for b in ecosystem.benchmarks
    ]


def evaluate_warnings(
    config: ScenarioConfig,
    summary: FinancialSummary,
    ecosystem: EcosystemConfig,
    user_share: UserShare,
    verification: VerificationVolume,
    benchmarks: list[BenchmarkComparison],
    theoretical_capital: float,
) -> list[RealityWarning]:
    """Apply every threshold rule independently; return warnings most severe first."""
    rpl = config.revenue.revenue_per_license
    warnings: list[RealityWarning] = []

    # ── alert ───────────────────────────────────────────────────────────
    if rpl > ecosystem.revenue_per_license_alert:
        warnings.append(RealityWarning(
            severity=Severity.ALERT,
            code=REVENUE_PER_LICENSE_EXTREME,
            message=(
                f"Revenue of ${rpl:,.2f}/license/month exceeds the "
                f"${ecosystem.revenue_per_license_alert:,.2f} plausibility ceiling."
            ),
            value=rpl,
        ))

    if verification.daily_per_license > ecosystem.daily_verifications_alert:
        warnings.append(RealityWarning(
            severity=Severity.ALERT,
            code=VERIFICATION_VOLUME_EXTREME,
            message=(
                f"Implied {verification.daily_per_license:,.0f} verifications per license per day "
                f"exceeds the {ecosystem.daily_verifications_alert:,.0f}/day ceiling."
            ),
            value=verification.daily_per_license,
        ))

    # ── warning ─────────────────────────────────────────────────────────
    if user_share.revenue_pct >= ecosystem.market_concentration_pct - SHARE_EPSILON:
        warnings.append(RealityWarning(
            severity=Severity.WARNING,
            code=MARKET_CONCENTRATION,
            message=(
                f"Significant market concentration: this scenario earns "
                f"{user_share.revenue_pct:.2f}% of realistic ecosystem revenue."
            ),
            value=user_share.revenue_pct,
        ))

    # ── caution ─────────────────────────────────────────────────────────
    if theoretical_capital > ecosystem.ecosystem_capital_caution:
        warnings.append(RealityWarning(
            severity=Severity.CAUTION,
            code=ECOSYSTEM_CAPITAL_EXTREME,
            message=(
                f"A fully built-out ecosystem would need ${theoretical_capital:,.0f} of capital, "
                f"above the ${ecosystem.ecosystem_capital_caution:,.0f} reference."
            ),
            value=theoretical_capital,
        ))

    outliers = [
        b for b in benchmarks if b.ratio > ecosystem.benchmark_multiple_caution
    ]
    if outliers:
        worst = max(outliers, key=lambda b: b.ratio)
        warnings.append(RealityWarning(
            severity=Severity.CAUTION,
            code=BENCHMARK_OUTLIER,
            message=(
                f"Revenue per license is {worst.ratio:.1f}× {worst.name} "
                f"(${worst.reference_revenue_per_license:,.2f}/month)."
            ),
            value=worst.ratio,
        ))

    # ── info ────────────────────────────────────────────────────────────
    be = summary.break_even_month
    if be is None:
        warnings.append(RealityWarning(
            severity=Severity.INFO,
            code=BREAK_EVEN_NOT_REACHED,
            message=f"Break-even is not reached within the {summary.horizon_months}-month horizon.",
        ))
    elif be > ecosystem.break_even_notice_months:
        warnings.append(RealityWarning(
            severity=Severity.INFO,
            code=LONG_BREAK_EVEN,
            message=f"Break-even at month {be} — a long-horizon investment.",
            value=float(be),
        ))

    # Stable sort keeps rule order within a severity.
    warnings.sort(key=lambda w: w.severity.rank, reverse=True)
    return warnings


def analyze(
    config: ScenarioConfig,
    summary: FinancialSummary,
    ecosystem: EcosystemConfig | None = None,
) -> EcosystemReport:
    """Build the ecosystem reality-check report for one scenario."""
    if ecosystem is None:
        ecosystem = EcosystemConfig()

    rev = config.revenue
    assumed = ecosystem.assumed_distribution

    # ── Ecosystem capacity — user's per-node count reused as the average ──
    total_nodes = ecosystem.total_nodes
    total_licenses = total_nodes * config.nodes.licenses_per_node

    # ── Revenue: theoretical max vs realistic ──────────────────────────
    theoretical_monthly = total_licenses * rev.revenue_per_license
    realistic_monthly = realistic_monthly_revenue(total_licenses, assumed, rev)

    # ── Capital ────────────────────────────────────────────────────────
    node_capital = total_nodes * config.nodes.node_unit_cost
    theoretical_capital = node_capital + total_licenses * config.costs.phone_unit_cost
    realistic_capital = (
        node_capital + total_licenses * assumed.self_run * config.costs.phone_unit_cost
    )

    # ── User share (realistic basis on both sides) ─────────────────────
    user_monthly = realistic_monthly_revenue(config.total_licenses, config.distribution, rev)
    user_share = UserShare(
        nodes_pct=_pct(config.nodes.node_count, total_nodes),
        licenses_pct=_pct(config.total_licenses, total_licenses),
        revenue_pct=_pct(user_monthly, realistic_monthly),
        investment_pct=_pct(config.initial_investment, realistic_capital),
    )

    verification = compute_verification_volume(config, ecosystem, total_licenses)
    benchmarks = compare_benchmarks(config, ecosystem)

    warnings = evaluate_warnings(
        config, summary, ecosystem, user_share, verification, benchmarks, theoretical_capital,
    )

    return EcosystemReport(
        total_nodes=total_nodes,
        total_licenses=total_licenses,
        theoretical_max_monthly_revenue=theoretical_monthly,
        theoretical_max_annual_revenue=theoretical_monthly * 12,
        realistic_monthly_revenue=realistic_monthly,
        realistic_annual_revenue=realistic_monthly * 12,
        theoretical_capital_requirement=theoretical_capital,
        realistic_capital_requirement=realistic_capital,
        user_monthly_revenue=user_monthly,
        user_share=user_share,
        verification=verification,
        benchmarks=benchmarks,
        warnings=warnings,
    )

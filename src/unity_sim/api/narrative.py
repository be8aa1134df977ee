"""Narrative generator — plain-English interpretation of projection results.

Converts a ``ProjectionResult`` (plus the steady-state view and the ecosystem
report) into a structured text block covering the fleet, the ramp-up path,
the financial outcome and the reality check.
"""

from __future__ import annotations

from unity_sim.config.scenario import ScenarioConfig
from unity_sim.models.results import (
    EcosystemReport,
    ProjectionResult,
    RoiFigure,
    SteadyStateMetrics,
)


def _roi_text(roi: RoiFigure) -> str:
    if roi.status == "defined" and roi.value is not None:
        return f"{roi.value * 100:.1f}%"
    if roi.status == "insufficient_horizon":
        return "undefined (horizon too short)"
    return "undefined (no investment)"


def _header(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def generate_narrative(
    config: ScenarioConfig,
    projection: ProjectionResult,
    steady: SteadyStateMetrics,
    report: EcosystemReport | None = None,
) -> str:
    """Generate a plain-English narrative for one scenario.

    Returns a structured text block covering:
      1. Fleet summary
      2. Ramp-up path
      3. Financial outcome
      4. Ecosystem reality check (when a report is supplied)
    """
    s = projection.summary
    series = projection.series
    ramp = config.ramp_up

    sections: list[str] = []

    # ── 1. Fleet summary ──
    sections += _header("FLEET SUMMARY")
    sections.append(
        f"Nodes: {config.nodes.node_count} × {config.nodes.licenses_per_node} licenses "
        f"= {config.total_licenses} licenses\n"
        f"Self-run: {config.self_run_licenses:,.0f}  "
        f"Leased: {config.leased_licenses:,.0f}  "
        f"Inactive: {config.inactive_licenses:,.0f}\n"
        f"Revenue per license: ${config.revenue.revenue_per_license:,.2f}/month "
        f"(lease split {config.revenue.lease_split * 100:.0f}%)\n"
        f"Initial investment: ${s.initial_investment:,.2f}"
    )

    # ── 2. Ramp-up ──
    sections.append("")
    sections += _header("RAMP-UP")
    sections.append(
        f"Self-run curve: {ramp.self_run.kind.value} over {ramp.self_run.duration_months} months\n"
        f"Leased curve: {ramp.leased.kind.value} over {ramp.leased.duration_months} months"
    )
    full = next(
        (p.month for p in series if p.self_run_activation >= 1.0 and p.leased_activation >= 1.0),
        None,
    )
    sections.append(
        f"Fully activated from month {full}." if full is not None
        else "Not fully activated within the horizon."
    )

    # ── 3. Financial outcome ──
    sections.append("")
    sections += _header("FINANCIAL OUTCOME")
    be = s.break_even_month
    sections.append(
        f"Horizon: {s.horizon_months} months\n"
        f"Total revenue: ${s.total_revenue:,.2f}\n"
        f"Total operating cost: ${s.total_cost:,.2f}\n"
        f"Cumulative cash flow at horizon: ${s.final_cumulative_cash_flow:,.2f}\n"
        f"Break-even month: {be if be is not None else 'NOT REACHED (within horizon)'}\n"
        f"12-month ROI: {_roi_text(s.roi_12_month)}\n"
        f"24-month ROI: {_roi_text(s.roi_24_month)}"
    )
    sections.append(
        f"\nSteady state: ${steady.monthly_revenue:,.2f} revenue − "
        f"${steady.monthly_cost:,.2f} cost = ${steady.net_monthly_profit:,.2f}/month "
        f"(${steady.annual_profit:,.2f}/year)"
    )
    if steady.payback_months is not None:
        sections.append(f"Simple payback: {steady.payback_months:.1f} months")
    else:
        sections.append("Simple payback: NEVER (monthly profit ≤ 0)")

    # ── 4. Reality check ──
    if report is not None:
        sections.append("")
        sections += _header("ECOSYSTEM REALITY CHECK")
        sections.append(
            f"Ecosystem: {report.total_nodes:,} nodes / {report.total_licenses:,} licenses\n"
            f"Theoretical max revenue: ${report.theoretical_max_monthly_revenue:,.0f}/month\n"
            f"Realistic revenue: ${report.realistic_monthly_revenue:,.0f}/month\n"
            f"Your share of realistic revenue: {report.user_share.revenue_pct:.3f}%\n"
            f"Implied verifications: {report.verification.daily_per_license:,.1f}/license/day"
        )
        for b in report.benchmarks:
            sections.append(f"  {b.ratio:5.1f}× {b.name} (${b.reference_revenue_per_license:,.2f}/month)")
        if report.warnings:
            sections.append("\nWarnings:")
            for w in report.warnings:
                sections.append(f"  [{w.severity.value.upper()}] {w.message}")
        else:
            sections.append("\nNo reality-check warnings.")

    return "\n".join(sections)


def generate_comparison_narrative(labels: list[str], results: list[ProjectionResult]) -> str:
    """Side-by-side summary of several scenarios, best horizon-end cash first."""
    rows = sorted(
        zip(labels, results),
        key=lambda pair: pair[1].summary.final_cumulative_cash_flow,
        reverse=True,
    )
    lines = _header("SCENARIO COMPARISON")
    for label, r in rows:
        be = r.summary.break_even_month
        lines.append(
            f"{label:30s}  cash ${r.summary.final_cumulative_cash_flow:>14,.2f}  "
            f"break-even {be if be is not None else '—':>4}"
        )
    return "\n".join(lines)

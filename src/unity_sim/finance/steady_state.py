"""Steady-state economics — the fully-ramped, single-month view.

Every license on its track is live, uptime applies, hardware is treated as
up-front capital.  This is the quick "what does a normal month look like"
answer that complements the month-by-month projection.
"""

from __future__ import annotations

from unity_sim.config.distribution import DistributionConfig
from unity_sim.config.revenue import RevenueConfig
from unity_sim.config.scenario import ScenarioConfig
from unity_sim.models.results import SteadyStateMetrics


def realistic_monthly_revenue(
    total_licenses: float,
    distribution: DistributionConfig,
    revenue: RevenueConfig,
) -> float:
    """Monthly revenue of a fully-activated license pool.

    Shared by the per-user and the ecosystem calculations so both sides of
    any share percentage sit on the same revenue basis.
    """
    rpl = revenue.revenue_per_license
    self_run = total_licenses * distribution.self_run * revenue.uptime_self_run * rpl
    leased = total_licenses * distribution.leased * revenue.uptime_leased * rpl * revenue.lease_split
    return self_run + leased


def compute_steady_state(config: ScenarioConfig) -> SteadyStateMetrics:
    """Fully-ramped monthly revenue, cost and simple payback."""
    rev = config.revenue
    costs = config.costs

    eff_self = config.self_run_licenses * rev.uptime_self_run
    eff_leased = config.leased_licenses * rev.uptime_leased

    revenue_self_run = eff_self * rev.revenue_per_license
    revenue_leased = eff_leased * rev.revenue_per_license * rev.lease_split
    monthly_revenue = revenue_self_run + revenue_leased

    sim_cost = eff_self * costs.sim_monthly_cost
    credit_cost = (eff_self + eff_leased) * costs.credit_monthly_cost if costs.operator_pays_credits else 0.0
    monthly_cost = sim_cost + credit_cost

    net = monthly_revenue - monthly_cost
    investment = config.initial_investment

    payback = investment / net if net > 0 else None
    if investment > 0:
        roi_12 = net * 12 / investment * 100
        roi_24 = net * 24 / investment * 100
    else:
        roi_12 = roi_24 = None

    return SteadyStateMetrics(
        monthly_revenue=monthly_revenue,
        revenue_self_run=revenue_self_run,
        revenue_leased=revenue_leased,
        monthly_sim_cost=sim_cost,
        monthly_credit_cost=credit_cost,
        monthly_cost=monthly_cost,
        net_monthly_profit=net,
        annual_profit=net * 12,
        initial_investment=investment,
        payback_months=payback,
        roi_12_month_pct=roi_12,
        roi_24_month_pct=roi_24,
    )

"""Monthly cash-flow simulation — ramp-up aware projection.

Key distinctions:
  - activation = fraction of a track's licenses in service (ramp-up curve).
  - effective licenses = licenses × activation × uptime — what actually earns.
  - hardware is bought on *activation* (a phone is needed whether or not the
    license is online that month); SIM and credits scale with *effective* licenses.
  - node cost is capital: charged once at month 0, outside monthly profit.

Values are kept at full float precision so that the cumulative recurrence
and the phone-cost conservation hold exactly.
"""

from __future__ import annotations

import logging

import numpy as np

from unity_sim.config.scenario import ScenarioConfig
from unity_sim.engine.curves import activation_curve
from unity_sim.models.results import MonthlyProjection

logger = logging.getLogger(__name__)


def hardware_schedule(
    activation: np.ndarray,
    licenses: float,
    phone_unit_cost: float,
    amortization_months: int = 1,
) -> np.ndarray:
    """Phone cost expensed per month for one track.

    Each month's newly activated licenses form a tranche costing
    ``new_licenses × phone_unit_cost``.  A tranche is spread evenly over
    ``amortization_months`` months starting the month it goes live, so the
    total charged per license is exactly ``phone_unit_cost``.  With the
    default window of 1 that total is reached by the month activation
    completes; a longer window delays it by ``amortization_months − 1`` months.

    Parameters
    ----------
    activation : np.ndarray
        Activation fractions for months 0..H−1 (non-decreasing).
    licenses : float
        Licenses on this track.
    phone_unit_cost : float
        One-time hardware cost per license.
    amortization_months : int
        Expensing window (≥1). 1 = expensed in the activation month.

    Returns
    -------
    np.ndarray
        Shape ``(H,)`` hardware cost per month.
    """
    horizon = len(activation)
    if horizon == 0:
        return np.zeros(0)

    newly_active = np.diff(activation, prepend=0.0)
    tranches = newly_active * licenses * phone_unit_cost

    if amortization_months <= 1:
        return tranches

    # Equal slices over the window; anything past the horizon is not yet due.
    window = np.full(amortization_months, 1.0 / amortization_months)
    return np.convolve(tranches, window)[:horizon]


def simulate(config: ScenarioConfig, horizon_months: int) -> list[MonthlyProjection]:
    """Project ``horizon_months`` months (0..H−1) for one scenario.

    Deterministic: the same config and horizon always give the same series.
    """
    rev = config.revenue
    costs = config.costs

    self_run_licenses = config.self_run_licenses
    leased_licenses = config.leased_licenses
    node_capex = config.node_capex

    # ── Ramp-up curves (one per track) ────────────────────────────────
    self_frac = activation_curve(config.ramp_up.self_run, horizon_months)
    leased_frac = activation_curve(config.ramp_up.leased, horizon_months)

    # ── Effective licenses — inactive licenses never appear here ──────
    eff_self = self_run_licenses * self_frac * rev.uptime_self_run
    eff_leased = leased_licenses * leased_frac * rev.uptime_leased

    # ── Hardware — self-run only; lessees bring their own device ─────
    hardware = hardware_schedule(
        self_frac, self_run_licenses, costs.phone_unit_cost,
        costs.hardware_amortization_months,
    )

    logger.debug(
        "simulate: %d months, %.1f self-run / %.1f leased licenses, node capex %.2f",
        horizon_months, self_run_licenses, leased_licenses, node_capex,
    )

    months: list[MonthlyProjection] = []
    cumulative = -node_capex

    for m in range(horizon_months):
        es = float(eff_self[m])
        el = float(eff_leased[m])

        # ── Revenue ──────────────────────────────────────────────────
        revenue = es * rev.revenue_per_license + el * rev.revenue_per_license * rev.lease_split

        # ── Costs ────────────────────────────────────────────────────
        hardware_cost = float(hardware[m])
        sim_cost = costs.sim_monthly_cost * es
        credit_cost = costs.credit_monthly_cost * (es + el) if costs.operator_pays_credits else 0.0
        total_cost = hardware_cost + sim_cost + credit_cost

        # ── Cash flow ────────────────────────────────────────────────
        profit = revenue - total_cost
        cumulative += profit

        months.append(MonthlyProjection(
            month=m,
            self_run_activation=float(self_frac[m]),
            leased_activation=float(leased_frac[m]),
            effective_self_run=es,
            effective_leased=el,
            revenue=revenue,
            hardware_cost=hardware_cost,
            sim_cost=sim_cost,
            credit_cost=credit_cost,
            node_cost=node_capex if m == 0 else 0.0,
            total_cost=total_cost,
            profit=profit,
            cumulative_cash_flow=cumulative,
        ))

    return months

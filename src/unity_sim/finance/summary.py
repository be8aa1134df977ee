"""Break-even and ROI — reduces a simulated series, never re-simulates.

Key formulas:
  break-even month = first index where cumulative cash flow ≥ 0
  ROI@N            = cumulative[N − 1] / initial_investment
"""

from __future__ import annotations

import numpy as np

from unity_sim.models.results import FinancialSummary, MonthlyProjection, RoiFigure

ROI_WINDOWS = (12, 24)


def find_break_even_month(cumulative: np.ndarray) -> int | None:
    """First month index with cumulative ≥ 0, or None if never within the series."""
    hits = np.flatnonzero(cumulative >= 0)
    return int(hits[0]) if hits.size else None


def compute_roi(cumulative: np.ndarray, months: int, initial_investment: float) -> RoiFigure:
    """Cumulative ROI after ``months`` months.

    Undefined (not an error) when the series is shorter than the window or
    there is nothing invested to divide by.
    """
    if len(cumulative) < months:
        return RoiFigure(months=months, status="insufficient_horizon")
    if initial_investment <= 0:
        return RoiFigure(months=months, status="no_investment")
    return RoiFigure(
        months=months,
        status="defined",
        value=float(cumulative[months - 1]) / initial_investment,
    )


def summarize(series: list[MonthlyProjection], initial_investment: float) -> FinancialSummary:
    """Reduce a monthly series to break-even, ROI and totals."""
    cumulative = np.array([p.cumulative_cash_flow for p in series], dtype=np.float64)

    return FinancialSummary(
        horizon_months=len(series),
        initial_investment=initial_investment,
        break_even_month=find_break_even_month(cumulative),
        roi_12_month=compute_roi(cumulative, 12, initial_investment),
        roi_24_month=compute_roi(cumulative, 24, initial_investment),
        total_revenue=float(sum(p.revenue for p in series)),
        total_cost=float(sum(p.total_cost for p in series)),
        final_cumulative_cash_flow=float(cumulative[-1]) if series else 0.0,
        final_monthly_revenue=series[-1].revenue if series else 0.0,
        cumulative_cash_flow=cumulative.tolist(),
        series=list(series),
    )

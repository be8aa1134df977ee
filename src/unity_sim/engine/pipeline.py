"""Public entry points — simulate → summarize → analyze.

Entry points:
  ``run_projection(config, horizon)``      → ProjectionResult(series, summary)
  ``run_ecosystem_report(config, summary)`` → EcosystemReport
  ``compare_scenarios(configs, horizon)``  → one ProjectionResult per config

Every call owns its inputs and outputs; nothing is cached or shared between
calls, so independent scenarios can be evaluated concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from unity_sim.config.ecosystem import EcosystemConfig
from unity_sim.config.scenario import ScenarioConfig
from unity_sim.engine.ecosystem import analyze
from unity_sim.engine.simulator import simulate
from unity_sim.errors import ConfigurationError
from unity_sim.finance.summary import summarize
from unity_sim.models.results import EcosystemReport, FinancialSummary, ProjectionResult

logger = logging.getLogger(__name__)


def _check_horizon(horizon_months: int) -> None:
    if isinstance(horizon_months, bool) or not isinstance(horizon_months, int) or horizon_months < 1:
        raise ConfigurationError(
            f"horizon_months must be a positive integer (got {horizon_months!r})"
        )


def run_projection(config: ScenarioConfig, horizon_months: int | None = None) -> ProjectionResult:
    """Simulate ``horizon_months`` months and summarize the series.

    ``horizon_months`` defaults to ``config.simulation.horizon_months``.
    A bad horizon raises ``ConfigurationError`` before any simulation work.
    """
    if not isinstance(config, ScenarioConfig):
        raise ConfigurationError(
            f"expected a ScenarioConfig, got {type(config).__name__}"
        )
    if horizon_months is None:
        horizon_months = config.simulation.horizon_months
    _check_horizon(horizon_months)

    series = simulate(config, horizon_months)
    summary = summarize(series, config.initial_investment)

    logger.debug(
        "run_projection: horizon=%d break_even=%s final_cumulative=%.2f",
        horizon_months, summary.break_even_month, summary.final_cumulative_cash_flow,
    )
    return ProjectionResult(series=series, summary=summary)


def run_ecosystem_report(
    config: ScenarioConfig,
    summary: FinancialSummary,
    ecosystem: EcosystemConfig | None = None,
) -> EcosystemReport:
    """Place one scenario's results in ecosystem context."""
    report = analyze(config, summary, ecosystem)
    logger.debug(
        "run_ecosystem_report: %d warnings, revenue share %.4f%%",
        len(report.warnings), report.user_share.revenue_pct,
    )
    return report


def compare_scenarios(
    configs: Iterable[ScenarioConfig],
    horizon_months: int,
) -> list[ProjectionResult]:
    """Run several what-if scenarios over the same horizon, in input order."""
    _check_horizon(horizon_months)
    return [run_projection(cfg, horizon_months) for cfg in configs]

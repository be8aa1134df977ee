"""Sensitivity / tornado analysis.

Vary one input at a time and measure the change in horizon-end cumulative
cash flow.  Produces tornado chart data sorted by impact.

Default sweep set:
  - revenue.revenue_per_license ± 20%
  - revenue.lease_split ± 25%
  - revenue.uptime_leased ± 10%
  - costs.phone_unit_cost ± 25%
  - costs.sim_monthly_cost ± 25%
  - costs.credit_monthly_cost ± 50%
  - nodes.node_unit_cost ± 20%
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from unity_sim.config.curve import CurveKind, CurveSpec
from unity_sim.config.distribution import DistributionConfig
from unity_sim.config.scenario import ScenarioConfig
from unity_sim.engine.pipeline import run_projection


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Dot-path into ScenarioConfig (e.g. 'costs.phone_unit_cost')."""

    base_value: float
    low_value: float
    high_value: float

    cash_at_low: float
    """Horizon-end cumulative cash flow when param = low_value."""

    cash_at_high: float
    """Horizon-end cumulative cash flow when param = high_value."""

    delta: float
    """abs(cash_at_high − cash_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    horizon_months: int
    base_cash: float
    """Horizon-end cumulative cash flow of the base scenario."""

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Revenue per license", "revenue.revenue_per_license", -0.20, 0.20),
    ("Lease split to operator", "revenue.lease_split", -0.25, 0.25),
    ("Leased uptime", "revenue.uptime_leased", -0.10, 0.10),
    ("Phone unit cost", "costs.phone_unit_cost", -0.25, 0.25),
    ("SIM monthly cost", "costs.sim_monthly_cost", -0.25, 0.25),
    ("Credit monthly cost", "costs.credit_monthly_cost", -0.50, 0.50),
    ("Node unit cost", "nodes.node_unit_cost", -0.20, 0.20),
]


_DISTRIBUTION_ABSORBER = {"self_run": "inactive", "leased": "inactive", "inactive": "leased"}
"""Fraction that takes up the difference when one distribution fraction is swept."""


def _get_nested_value(data: dict[str, Any], path: str) -> float:
    current: Any = data
    for part in path.split("."):
        current = current[part]
    return float(current)


def _resolve_field(config: ScenarioConfig, path: str) -> tuple[BaseModel, str, FieldInfo]:
    """Owning model, leaf name and field info for a sweep path.

    Unknown segments raise ``KeyError``; a leaf that is not a plain int/float
    field (a sub-model, a flag, an optional override) raises ``ValueError``.
    """
    *parents, leaf = path.split(".")
    model: Any = config
    for part in parents:
        if not isinstance(model, BaseModel) or part not in type(model).model_fields:
            raise KeyError(path)
        model = getattr(model, part)
    if not isinstance(model, BaseModel) or leaf not in type(model).model_fields:
        raise KeyError(path)
    info = type(model).model_fields[leaf]
    if info.annotation not in (int, float):
        raise ValueError(f"'{path}' is not a numeric field and cannot be swept")
    return model, leaf, info


def _domain_bounds(config: ScenarioConfig, path: str) -> tuple[float | None, float | None, bool]:
    """(lower, upper, is_int) for a swept value: field ge/le plus cross-field rules."""
    owner, leaf, info = _resolve_field(config, path)
    lower = upper = None
    for meta in info.metadata:
        if getattr(meta, "ge", None) is not None:
            lower = meta.ge
        if getattr(meta, "le", None) is not None:
            upper = meta.le

    if isinstance(owner, DistributionConfig):
        # The absorbing fraction cannot go negative
        upper = getattr(owner, leaf) + getattr(owner, _DISTRIBUTION_ABSORBER[leaf])
    elif (
        isinstance(owner, CurveSpec)
        and leaf == "duration_months"
        and owner.kind is not CurveKind.IMMEDIATE
    ):
        lower = max(lower or 0, 1)

    return lower, upper, info.annotation is int


def _with_value(config: ScenarioConfig, path: str, value: float) -> ScenarioConfig:
    """Rebuild ``config`` with one field replaced, clamped to its valid domain.

    Distribution fractions stay summed to 1.0: the difference goes to
    ``inactive`` (or to ``leased`` when ``inactive`` itself is swept).
    """
    lower, upper, is_int = _domain_bounds(config, path)
    if lower is not None:
        value = max(value, lower)
    if upper is not None:
        value = min(value, upper)
    if is_int:
        value = round(value)

    data = config.model_dump()
    parts = path.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    leaf = parts[-1]
    if parts[:-1] == ["distribution"]:
        absorber = _DISTRIBUTION_ABSORBER[leaf]
        target[absorber] = target[leaf] + target[absorber] - value
    target[leaf] = value
    return ScenarioConfig.model_validate(data)


def _final_cash(config: ScenarioConfig, horizon_months: int) -> float:
    return run_projection(config, horizon_months).summary.final_cumulative_cash_flow


def run_sensitivity(
    config: ScenarioConfig,
    horizon_months: int | None = None,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run one-at-a-time sweeps around ``config``.

    Parameters
    ----------
    config : ScenarioConfig
        Base scenario.
    horizon_months : int | None
        Projection horizon. None = ``config.simulation.horizon_months``.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by cash-flow impact.

    Raises
    ------
    KeyError
        A sweep path names a field that does not exist.
    ValueError
        A sweep path names a field that is not an int/float scalar.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS
    if horizon_months is None:
        horizon_months = config.simulation.horizon_months

    base_cash = _final_cash(config, horizon_months)
    base_data = config.model_dump()

    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        _resolve_field(config, path)
        base_val = _get_nested_value(base_data, path)

        low_cfg = _with_value(config, path, base_val * (1 + low_pct))
        high_cfg = _with_value(config, path, base_val * (1 + high_pct))
        low_val = _get_nested_value(low_cfg.model_dump(), path)
        high_val = _get_nested_value(high_cfg.model_dump(), path)

        cash_low = _final_cash(low_cfg, horizon_months)
        cash_high = _final_cash(high_cfg, horizon_months)

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            cash_at_low=round(cash_low, 2),
            cash_at_high=round(cash_high, 2),
            delta=round(abs(cash_high - cash_low), 2),
        ))

    # Sort by impact (largest swing first)
    bars.sort(key=lambda b: b.delta, reverse=True)

    return SensitivityResult(horizon_months=horizon_months, base_cash=round(base_cash, 2), bars=bars)

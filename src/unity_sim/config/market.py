"""Market-share presets — revenue per license implied by network market share.

Assumes a device at maximum capacity carries 7 GB ≈ $208/month, and that
revenue scales linearly with carried data.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from unity_sim.config.scenario import ScenarioConfig
from unity_sim.errors import ConfigurationError


class MarketScenario(BaseModel):
    """One market-share preset.

    Only ``revenue_per_license`` feeds the projection.  ``market_share_pct``,
    ``data_gb_per_device`` and ``ecosystem_licenses_millions`` are descriptive:
    they explain where the revenue figure comes from and are returned as-is by
    ``GET /market-scenarios``.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    market_share_pct: float
    revenue_per_license: float
    data_gb_per_device: float
    ecosystem_licenses_millions: float


MARKET_SCENARIOS: dict[str, MarketScenario] = {
    "conservative": MarketScenario(
        key="conservative", label="1% Market Share", market_share_pct=1,
        revenue_per_license=208, data_gb_per_device=7, ecosystem_licenses_millions=1.2,
    ),
    "moderate": MarketScenario(
        key="moderate", label="5% Market Share", market_share_pct=5,
        revenue_per_license=1042, data_gb_per_device=35, ecosystem_licenses_millions=6.0,
    ),
    "optimistic": MarketScenario(
        key="optimistic", label="10% Market Share", market_share_pct=10,
        revenue_per_license=2083, data_gb_per_device=70, ecosystem_licenses_millions=12.0,
    ),
}


def apply_market_scenario(config: ScenarioConfig, key: str) -> ScenarioConfig:
    """Return a copy of ``config`` earning the preset's revenue per license."""
    try:
        preset = MARKET_SCENARIOS[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown market scenario '{key}' — expected one of {sorted(MARKET_SCENARIOS)}"
        ) from None
    revenue = config.revenue.model_copy(update={"revenue_per_license": preset.revenue_per_license})
    return config.model_copy(update={"revenue": revenue})

"""Top-level scenario — bundles every simulation input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from unity_sim.config.nodes import NodeConfig
from unity_sim.config.distribution import DistributionConfig
from unity_sim.config.revenue import RevenueConfig
from unity_sim.config.costs import CostConfig
from unity_sim.config.curve import RampUpConfig
from unity_sim.errors import ConfigurationError


class SimulationConfig(BaseModel):
    """Simulation-level settings."""

    model_config = ConfigDict(frozen=True)

    horizon_months: int = Field(
        default=24, ge=1, le=120,
        description="Default projection horizon (months). Typical range 12–36.",
    )


class ScenarioConfig(BaseModel):
    """Complete, immutable input bundle for one projection.

    A changed assumption means a new ``ScenarioConfig`` — use
    ``model_copy(update=...)`` or :func:`build_scenario`, never mutate.
    """

    model_config = ConfigDict(frozen=True)

    nodes: NodeConfig = Field(default_factory=NodeConfig)
    distribution: DistributionConfig = Field(default_factory=DistributionConfig)
    revenue: RevenueConfig = Field(default_factory=RevenueConfig)
    costs: CostConfig = Field(default_factory=CostConfig)
    ramp_up: RampUpConfig = Field(default_factory=RampUpConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)

    # --- Fleet totals (licenses, fractional when the distribution is) ---

    @property
    def total_licenses(self) -> int:
        return self.nodes.node_count * self.nodes.licenses_per_node

    @property
    def self_run_licenses(self) -> float:
        return self.total_licenses * self.distribution.self_run

    @property
    def leased_licenses(self) -> float:
        return self.total_licenses * self.distribution.leased

    @property
    def inactive_licenses(self) -> float:
        return self.total_licenses * self.distribution.inactive

    # --- Capital ---

    @property
    def node_capex(self) -> float:
        """Nodes × unit cost — paid in full at month 0."""
        return self.nodes.node_count * self.nodes.node_unit_cost

    @property
    def phone_capex(self) -> float:
        """Phones are only needed for licenses the operator runs."""
        return self.self_run_licenses * self.costs.phone_unit_cost

    @property
    def initial_investment(self) -> float:
        return self.node_capex + self.phone_capex


def build_scenario(data: dict[str, Any] | None = None) -> ScenarioConfig:
    """Validate a (possibly partial) scenario dict.

    Missing sections and fields take their defaults.  Any out-of-domain value
    raises :class:`ConfigurationError` with every offending field listed.
    """
    try:
        return ScenarioConfig.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigurationError.from_validation_error(exc) from exc

"""Configuration models — every simulation input."""

from unity_sim.config.curve import CurveKind, CurveSpec, RampUpConfig
from unity_sim.config.nodes import NodeConfig
from unity_sim.config.distribution import DistributionConfig
from unity_sim.config.revenue import RevenueConfig
from unity_sim.config.costs import CostConfig
from unity_sim.config.scenario import ScenarioConfig, SimulationConfig, build_scenario
from unity_sim.config.ecosystem import Benchmark, EcosystemConfig
from unity_sim.config.market import MARKET_SCENARIOS, MarketScenario, apply_market_scenario

__all__ = [
    "CurveKind",
    "CurveSpec",
    "RampUpConfig",
    "NodeConfig",
    "DistributionConfig",
    "RevenueConfig",
    "CostConfig",
    "SimulationConfig",
    "ScenarioConfig",
    "build_scenario",
    "Benchmark",
    "EcosystemConfig",
    "MARKET_SCENARIOS",
    "MarketScenario",
    "apply_market_scenario",
]

"""Pydantic validation tests — ensure invalid inputs are rejected.

Covers every config model's boundaries plus the ``ConfigurationError``
raised at the pipeline boundary.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from unity_sim.config import (
    CostConfig,
    CurveKind,
    CurveSpec,
    DistributionConfig,
    EcosystemConfig,
    NodeConfig,
    RevenueConfig,
    ScenarioConfig,
    SimulationConfig,
    build_scenario,
)
from unity_sim.engine.pipeline import compare_scenarios, run_projection
from unity_sim.errors import ConfigurationError


# ═══════════════════════════════════════════════════════════════════════════
# NodeConfig
# ═══════════════════════════════════════════════════════════════════════════

class TestNodeValidation:
    def test_defaults_are_valid(self):
        n = NodeConfig()
        assert n.node_count == 4
        assert n.licenses_per_node == 200

    def test_negative_nodes_rejected(self):
        with pytest.raises(ValidationError):
            NodeConfig(node_count=-1)

    def test_zero_nodes_allowed(self):
        assert NodeConfig(node_count=0).node_count == 0

    def test_zero_licenses_per_node_rejected(self):
        with pytest.raises(ValidationError):
            NodeConfig(licenses_per_node=0)

    def test_negative_node_cost_rejected(self):
        with pytest.raises(ValidationError):
            NodeConfig(node_unit_cost=-1)


# ═══════════════════════════════════════════════════════════════════════════
# DistributionConfig
# ═══════════════════════════════════════════════════════════════════════════

class TestDistributionValidation:
    def test_must_sum_to_one(self):
        with pytest.raises(ValidationError, match="must equal 1.0"):
            DistributionConfig(self_run=0.5, leased=0.5, inactive=0.5)

    def test_tolerates_float_noise(self):
        d = DistributionConfig(self_run=0.1, leased=0.2, inactive=0.7 + 1e-9)
        assert d.self_run == 0.1

    def test_negative_fraction_rejected(self):
        with pytest.raises(ValidationError):
            DistributionConfig(self_run=-0.25, leased=1.0, inactive=0.25)

    def test_from_counts(self):
        d = DistributionConfig.from_counts(0, 150, 50)
        assert d.self_run == 0
        assert d.leased == pytest.approx(0.75)
        assert d.inactive == pytest.approx(0.25)

    def test_from_counts_rejects_empty(self):
        with pytest.raises(ValueError):
            DistributionConfig.from_counts(0, 0, 0)


# ═══════════════════════════════════════════════════════════════════════════
# Revenue / costs / simulation
# ═══════════════════════════════════════════════════════════════════════════

class TestRevenueValidation:
    def test_uptime_above_one_rejected(self):
        with pytest.raises(ValidationError):
            RevenueConfig(uptime_leased=1.2)

    def test_lease_split_above_one_rejected(self):
        with pytest.raises(ValidationError):
            RevenueConfig(lease_split=1.5)

    def test_negative_revenue_rejected(self):
        with pytest.raises(ValidationError):
            RevenueConfig(revenue_per_license=-5)


class TestCostValidation:
    def test_negative_phone_cost_rejected(self):
        with pytest.raises(ValidationError):
            CostConfig(phone_unit_cost=-80)

    def test_zero_amortization_rejected(self):
        with pytest.raises(ValidationError):
            CostConfig(hardware_amortization_months=0)


class TestSimulationValidation:
    def test_zero_horizon_rejected(self):
        with pytest.raises(ValidationError):
            SimulationConfig(horizon_months=0)

    def test_horizon_above_max_rejected(self):
        with pytest.raises(ValidationError):
            SimulationConfig(horizon_months=121)


class TestCurveValidation:
    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            CurveSpec(kind="exponential", duration_months=6)

    def test_kind_from_string(self):
        assert CurveSpec(kind="linear", duration_months=3).kind is CurveKind.LINEAR


class TestEcosystemValidation:
    def test_zero_total_nodes_rejected(self):
        with pytest.raises(ValidationError):
            EcosystemConfig(total_nodes=0)

    def test_zero_revenue_per_verification_rejected(self):
        with pytest.raises(ValidationError):
            EcosystemConfig(revenue_per_verification=0)


# ═══════════════════════════════════════════════════════════════════════════
# ScenarioConfig / pipeline boundary
# ═══════════════════════════════════════════════════════════════════════════

class TestScenarioValidation:
    def test_defaults_are_valid(self):
        s = ScenarioConfig()
        assert s.total_licenses == 800
        assert s.initial_investment == pytest.approx(20_000)

    def test_frozen(self):
        s = ScenarioConfig()
        with pytest.raises(ValidationError):
            s.nodes.node_count = 10

    def test_build_scenario_wraps_errors(self):
        with pytest.raises(ConfigurationError) as info:
            build_scenario({"distribution": {"self_run": 0.9, "leased": 0.9, "inactive": 0.0}})
        assert info.value.errors
        assert info.value.errors[0]["loc"][0] == "distribution"
        assert "distribution" in str(info.value)

    def test_build_scenario_partial(self):
        s = build_scenario({"nodes": {"node_count": 10}})
        assert s.nodes.node_count == 10
        assert s.nodes.licenses_per_node == 200

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_scenario({"revenue": {"uptime_self_run": 2}})


class TestHorizonValidation:
    @pytest.mark.parametrize("horizon", [0, -3, 1.5, True])
    def test_bad_horizon_rejected(self, horizon):
        with pytest.raises(ConfigurationError):
            run_projection(ScenarioConfig(), horizon)

    def test_bad_horizon_on_compare(self):
        with pytest.raises(ConfigurationError):
            compare_scenarios([ScenarioConfig()], 0)

    def test_non_scenario_rejected(self):
        with pytest.raises(ConfigurationError):
            run_projection({"nodes": {"node_count": 4}}, 12)

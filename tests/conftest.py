"""Shared test fixtures — sample scenarios matching the worked examples."""

from __future__ import annotations

import pytest

from unity_sim.config import (
    CostConfig,
    CurveKind,
    CurveSpec,
    DistributionConfig,
    NodeConfig,
    RampUpConfig,
    RevenueConfig,
    ScenarioConfig,
)


@pytest.fixture
def leased_only_scenario() -> ScenarioConfig:
    """1 node, 200 licenses: 0% self-run / 75% leased / 25% inactive at $208, 95% uptime."""
    return ScenarioConfig(
        nodes=NodeConfig(node_count=1, licenses_per_node=200, node_unit_cost=5_000),
        distribution=DistributionConfig(self_run=0.0, leased=0.75, inactive=0.25),
        revenue=RevenueConfig(
            revenue_per_license=208,
            lease_split=0.40,
            uptime_self_run=0.95,
            uptime_leased=0.95,
        ),
        costs=CostConfig(operator_pays_credits=False),
    )


@pytest.fixture
def self_run_linear_scenario() -> ScenarioConfig:
    """100% self-run, linear 6-month ramp, no leasing."""
    return ScenarioConfig(
        nodes=NodeConfig(node_count=2, licenses_per_node=100),
        distribution=DistributionConfig(self_run=1.0, leased=0.0, inactive=0.0),
        revenue=RevenueConfig(revenue_per_license=75),
        costs=CostConfig(phone_unit_cost=80, sim_monthly_cost=10, credit_monthly_cost=1.99),
        ramp_up=RampUpConfig(self_run=CurveSpec(kind=CurveKind.LINEAR, duration_months=6)),
    )


@pytest.fixture
def mixed_scenario() -> ScenarioConfig:
    """4 nodes, 25/50/25 split, S-curve self-run ramp and linear leased ramp."""
    return ScenarioConfig(
        nodes=NodeConfig(node_count=4, licenses_per_node=200, node_unit_cost=5_000),
        distribution=DistributionConfig(self_run=0.25, leased=0.50, inactive=0.25),
        revenue=RevenueConfig(
            revenue_per_license=208,
            lease_split=0.40,
            uptime_self_run=0.95,
            uptime_leased=0.90,
        ),
        costs=CostConfig(
            phone_unit_cost=80,
            sim_monthly_cost=10,
            credit_monthly_cost=1.99,
            operator_pays_credits=True,
        ),
        ramp_up=RampUpConfig(
            self_run=CurveSpec(kind=CurveKind.S_CURVE_MODERATE, duration_months=6),
            leased=CurveSpec(kind=CurveKind.LINEAR, duration_months=3),
        ),
    )

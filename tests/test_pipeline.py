"""End-to-end tests for the public entry points."""

from __future__ import annotations

from pathlib import Path

import pytest

from unity_sim.config import RevenueConfig, ScenarioConfig, SimulationConfig
from unity_sim.engine.pipeline import compare_scenarios, run_ecosystem_report, run_projection


class TestRunProjection:
    def test_default_horizon_from_config(self):
        cfg = ScenarioConfig(simulation=SimulationConfig(horizon_months=18))
        result = run_projection(cfg)
        assert len(result.series) == 18
        assert result.summary.horizon_months == 18

    def test_explicit_horizon_wins(self, mixed_scenario):
        assert len(run_projection(mixed_scenario, 6).series) == 6

    def test_summary_matches_series(self, mixed_scenario):
        result = run_projection(mixed_scenario, 24)
        assert result.summary.series == result.series
        assert result.summary.final_cumulative_cash_flow == result.series[-1].cumulative_cash_flow

    def test_repeatable(self, mixed_scenario):
        a = run_projection(mixed_scenario, 24)
        b = run_projection(mixed_scenario, 24)
        assert a.model_dump_json() == b.model_dump_json()

    def test_input_not_mutated(self, mixed_scenario):
        before = mixed_scenario.model_dump_json()
        run_projection(mixed_scenario, 24)
        assert mixed_scenario.model_dump_json() == before


class TestRunEcosystemReport:
    def test_report_from_projection(self, mixed_scenario):
        result = run_projection(mixed_scenario, 24)
        report = run_ecosystem_report(mixed_scenario, result.summary)
        assert report.total_nodes == 6_000
        assert report.user_share.nodes_pct == pytest.approx(4 / 6_000 * 100)


class TestCompareScenarios:
    def test_results_in_input_order(self, mixed_scenario):
        low = mixed_scenario.model_copy(update={
            "revenue": RevenueConfig(revenue_per_license=50, lease_split=0.4),
        })
        results = compare_scenarios([mixed_scenario, low], 12)
        assert len(results) == 2
        assert all(r.summary.horizon_months == 12 for r in results)
        assert results[0].summary.total_revenue > results[1].summary.total_revenue

    def test_matches_individual_runs(self, mixed_scenario, leased_only_scenario):
        results = compare_scenarios([mixed_scenario, leased_only_scenario], 24)
        assert results[1].summary == run_projection(leased_only_scenario, 24).summary

    def test_empty(self):
        assert compare_scenarios([], 12) == []


def test_yaml_scenario_loads():
    """base_case.yaml loads into a ScenarioConfig and projects."""
    import yaml

    yaml_path = Path(__file__).parent.parent / "scenarios" / "base_case.yaml"
    with open(yaml_path) as f:
        data = yaml.safe_load(f)
    scenario = ScenarioConfig(**data)
    assert scenario.total_licenses == 800
    assert scenario.revenue.revenue_per_license == 208

    result = run_projection(scenario)
    assert result.summary.horizon_months == 24
    assert result.summary.break_even_month is not None

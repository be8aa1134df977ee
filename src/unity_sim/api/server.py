"""FastAPI server — JSON access to the projection engine.

Run with:
    uvicorn unity_sim.api.server:app --reload --port 8000

Or:
    python -m unity_sim.api.server

Endpoints:
    GET  /health              — liveness probe
    GET  /schema              — JSON Schema for ScenarioConfig
    GET  /scenario/defaults   — complete default scenario as JSON
    GET  /market-scenarios    — market-share revenue presets
    POST /projection          — month-by-month series + summary + steady state
    POST /ecosystem           — projection + ecosystem reality check
    POST /compare             — several scenarios side by side
    POST /sensitivity         — parameter sweep → tornado data
    POST /narrative           — plain-English interpretation
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from unity_sim.config.ecosystem import EcosystemConfig
from unity_sim.config.market import MARKET_SCENARIOS, apply_market_scenario
from unity_sim.config.scenario import ScenarioConfig, build_scenario
from unity_sim.engine.pipeline import compare_scenarios, run_ecosystem_report, run_projection
from unity_sim.errors import ConfigurationError
from unity_sim.finance.sensitivity import run_sensitivity
from unity_sim.finance.steady_state import compute_steady_state
from unity_sim.api.narrative import generate_comparison_narrative, generate_narrative

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Unity Nodes ROI Simulator API",
    version="1.0",
    description=(
        "Ramp-up aware ROI projections for Unity Nodes operators: month-by-month "
        "cash flow, break-even, ROI and an ecosystem-wide reality check."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class ProjectionRequest(BaseModel):
    """Request body for /projection, /ecosystem and /narrative. All fields optional."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full ScenarioConfig JSON. Missing fields use defaults. "
                    "Example: {'nodes': {'node_count': 10}, 'revenue': {'revenue_per_license': 208}}",
    )
    horizon_months: int | None = Field(
        default=None, ge=1, le=120,
        description="Projection horizon. None = scenario.simulation.horizon_months.",
    )
    market_scenario: str | None = Field(
        default=None,
        description="Optional preset key ('conservative', 'moderate', 'optimistic') "
                    "overriding revenue per license.",
    )
    ecosystem: dict[str, Any] = Field(
        default_factory=dict,
        description="Overrides for ecosystem constants and warning thresholds.",
    )


class CompareRequest(BaseModel):
    """Request body for /compare."""
    scenarios: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Partial scenarios to compare. Each may carry a 'label' key.",
    )
    horizon_months: int = Field(default=24, ge=1, le=120)


class SensitivityRequest(BaseModel):
    """Request body for /sensitivity."""
    scenario: dict[str, Any] = Field(default_factory=dict)
    horizon_months: int | None = Field(default=None, ge=1, le=120)
    sweep_params: list[dict[str, Any]] | None = Field(
        default=None,
        description="Optional override of sweep parameters. "
                    "Format: [{'name': 'My param', 'path': 'costs.phone_unit_cost', 'low_pct': -0.2, 'high_pct': 0.2}]",
    )


class ProjectionResponse(BaseModel):
    """Response from /projection."""
    series: list[dict[str, Any]]
    summary: dict[str, Any]
    steady_state: dict[str, Any]


class EcosystemResponse(BaseModel):
    """Response from /ecosystem."""
    summary: dict[str, Any]
    report: dict[str, Any]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _scenario_or_422(data: dict[str, Any], market_scenario: str | None = None) -> ScenarioConfig:
    """Validate a partial scenario; invalid input becomes HTTP 422."""
    try:
        scenario = build_scenario(data)
        if market_scenario is not None:
            scenario = apply_market_scenario(scenario, market_scenario)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors or str(exc)) from exc
    return scenario


def _ecosystem_or_422(data: dict[str, Any]) -> EcosystemConfig:
    try:
        return EcosystemConfig.model_validate(data)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=ConfigurationError.from_validation_error(exc).errors) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and the endpoint list."""
    return {
        "name": "Unity Nodes ROI Simulator API",
        "version": "1.0",
        "docs": "GET /docs (interactive Swagger UI)",
        "endpoints": [
            "/schema", "/scenario/defaults", "/market-scenarios",
            "/projection", "/ecosystem", "/compare", "/sensitivity", "/narrative",
        ],
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for ScenarioConfig — every input with type, default and constraints."""
    return ScenarioConfig.model_json_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default scenario. Use as a starting point for modifications."""
    return ScenarioConfig().model_dump(mode="json")


@app.get("/market-scenarios")
def get_market_scenarios():
    return {key: preset.model_dump() for key, preset in MARKET_SCENARIOS.items()}


@app.post("/projection", response_model=ProjectionResponse)
def projection(req: ProjectionRequest):
    """Run the month-by-month projection for one scenario."""
    scenario = _scenario_or_422(req.scenario, req.market_scenario)
    result = run_projection(scenario, req.horizon_months)
    logger.info("projection: horizon=%d break_even=%s",
                result.summary.horizon_months, result.summary.break_even_month)
    return ProjectionResponse(
        series=[p.model_dump(mode="json") for p in result.series],
        summary=result.summary.model_dump(mode="json", exclude={"series"}),
        steady_state=compute_steady_state(scenario).model_dump(mode="json"),
    )


@app.post("/ecosystem", response_model=EcosystemResponse)
def ecosystem_report(req: ProjectionRequest):
    """Run the projection and place it in ecosystem context."""
    scenario = _scenario_or_422(req.scenario, req.market_scenario)
    eco = _ecosystem_or_422(req.ecosystem)
    result = run_projection(scenario, req.horizon_months)
    report = run_ecosystem_report(scenario, result.summary, eco)
    logger.info("ecosystem: %d warnings", len(report.warnings))
    return EcosystemResponse(
        summary=result.summary.model_dump(mode="json", exclude={"series"}),
        report=report.model_dump(mode="json"),
    )


@app.post("/compare")
def compare(req: CompareRequest):
    """Compare several what-if scenarios over one horizon."""
    labels: list[str] = []
    scenarios: list[ScenarioConfig] = []
    for i, raw in enumerate(req.scenarios):
        data = dict(raw)
        labels.append(str(data.pop("label", f"Scenario {i + 1}")))
        scenarios.append(_scenario_or_422(data))

    results = compare_scenarios(scenarios, req.horizon_months)

    return {
        "results": [
            {"label": label, **r.summary.model_dump(mode="json", exclude={"series"})}
            for label, r in zip(labels, results)
        ],
        "comparison_narrative": generate_comparison_narrative(labels, results),
    }


@app.post("/sensitivity")
def sensitivity(req: SensitivityRequest):
    """One-at-a-time sweeps ranked by impact on horizon-end cumulative cash flow."""
    scenario = _scenario_or_422(req.scenario)

    sweep_config = None
    if req.sweep_params:
        sweep_config = [
            (sp.get("name", sp["path"]), sp["path"], sp.get("low_pct", -0.15), sp.get("high_pct", 0.15))
            for sp in req.sweep_params
        ]

    try:
        result = run_sensitivity(scenario, req.horizon_months, sweep_config)
    except (KeyError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=f"Invalid sweep parameter: {exc}") from exc

    return {
        "horizon_months": result.horizon_months,
        "base_cash": result.base_cash,
        "tornado_bars": [
            {
                "param_name": bar.param_name,
                "param_path": bar.param_path,
                "base_value": bar.base_value,
                "low_value": bar.low_value,
                "high_value": bar.high_value,
                "cash_at_low": bar.cash_at_low,
                "cash_at_high": bar.cash_at_high,
                "delta": bar.delta,
            }
            for bar in result.bars
        ],
    }


@app.post("/narrative")
def narrative(req: ProjectionRequest):
    """Run projection + reality check and return the plain-English narrative."""
    scenario = _scenario_or_422(req.scenario, req.market_scenario)
    eco = _ecosystem_or_422(req.ecosystem)
    result = run_projection(scenario, req.horizon_months)
    steady = compute_steady_state(scenario)
    report = run_ecosystem_report(scenario, result.summary, eco)
    return {
        "narrative": generate_narrative(scenario, result, steady, report),
        "headline_metrics": {
            "break_even_month": result.summary.break_even_month,
            "final_cumulative_cash_flow": round(result.summary.final_cumulative_cash_flow, 2),
            "roi_12_month": result.summary.roi_12_month.value,
            "roi_24_month": result.summary.roi_24_month.value,
            "highest_severity": report.highest_severity.value if report.highest_severity else None,
        },
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "unity_sim.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()

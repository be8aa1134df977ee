"""Engine — ramp-up curves, monthly simulation and ecosystem analysis."""

from unity_sim.engine.curves import activation_curve, activation_fraction
from unity_sim.engine.simulator import hardware_schedule, simulate
from unity_sim.engine.ecosystem import analyze
from unity_sim.engine.pipeline import compare_scenarios, run_ecosystem_report, run_projection

__all__ = [
    "activation_fraction",
    "activation_curve",
    "hardware_schedule",
    "simulate",
    "analyze",
    "run_projection",
    "run_ecosystem_report",
    "compare_scenarios",
]

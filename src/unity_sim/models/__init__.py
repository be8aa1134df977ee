"""Result models — simulation output contracts."""

from unity_sim.models.results import (
    BenchmarkComparison,
    EcosystemReport,
    FinancialSummary,
    MonthlyProjection,
    ProjectionResult,
    RealityWarning,
    RoiFigure,
    Severity,
    SteadyStateMetrics,
    UserShare,
    VerificationVolume,
)

__all__ = [
    "BenchmarkComparison",
    "EcosystemReport",
    "FinancialSummary",
    "MonthlyProjection",
    "ProjectionResult",
    "RealityWarning",
    "RoiFigure",
    "Severity",
    "SteadyStateMetrics",
    "UserShare",
    "VerificationVolume",
]

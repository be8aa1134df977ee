"""Ramp-up curves — how fast each license track is brought into service."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CurveKind(str, Enum):
    """Closed set of adoption-curve shapes."""

    IMMEDIATE = "immediate"
    LINEAR = "linear"
    S_CURVE_MODERATE = "s_curve_moderate"
    AGGRESSIVE = "aggressive"
    CONSERVATIVE = "conservative"


MAX_RAMP_MONTHS = 12


class CurveSpec(BaseModel):
    """Ramp-up settings for one track (self-run or leased).

    ``duration_months`` is forced to 0 for ``immediate`` curves so that two
    immediate specs always compare equal regardless of what the caller sent.
    """

    model_config = ConfigDict(frozen=True)

    kind: CurveKind = Field(
        default=CurveKind.IMMEDIATE,
        description="Adoption curve shape. 'immediate' = every license live from month 0.",
    )
    duration_months: int = Field(
        default=0, ge=0, le=MAX_RAMP_MONTHS,
        description="Months until the track is fully activated (1–12). "
                    "Ignored (stored as 0) for 'immediate'.",
    )
    steepness: float | None = Field(
        default=None, gt=0,
        description="Override for the S-curve steepness constant (k × duration). "
                    "None = the default for the curve kind. Ignored for immediate/linear.",
    )
    center_ratio: float | None = Field(
        default=None, gt=0, lt=1,
        description="Override for the S-curve midpoint as a fraction of the duration. "
                    "None = the default for the curve kind.",
    )

    @model_validator(mode="before")
    @classmethod
    def _immediate_has_no_duration(cls, data: Any) -> Any:
        if isinstance(data, dict):
            kind = data.get("kind", CurveKind.IMMEDIATE)
            try:
                kind = CurveKind(kind)
            except ValueError:
                return data  # field validation reports the bad kind
            if kind is CurveKind.IMMEDIATE:
                data = {**data, "duration_months": 0}
        return data

    @model_validator(mode="after")
    def _ramped_curves_need_duration(self) -> "CurveSpec":
        if self.kind is not CurveKind.IMMEDIATE and not (
            1 <= self.duration_months <= MAX_RAMP_MONTHS
        ):
            raise ValueError(
                f"duration_months must be between 1 and {MAX_RAMP_MONTHS} "
                f"for '{self.kind.value}' curves (got {self.duration_months})"
            )
        return self


class RampUpConfig(BaseModel):
    """Independent ramp-up curves for the two revenue-earning tracks."""

    model_config = ConfigDict(frozen=True)

    self_run: CurveSpec = Field(default_factory=CurveSpec)
    leased: CurveSpec = Field(default_factory=CurveSpec)

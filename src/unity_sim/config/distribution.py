"""License distribution — how each node's licenses are put to work."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

DISTRIBUTION_TOLERANCE = 1e-6
"""Allowed deviation of self_run + leased + inactive from 1.0."""


class DistributionConfig(BaseModel):
    """Fractions of every node's licenses per track.

    - **self_run**: operator buys the phone, pays SIM (and credits) and keeps
      100% of the license revenue.
    - **leased**: a lessee runs the device and pays their own costs; the
      operator receives ``lease_split`` of the revenue.
    - **inactive**: never earns, never costs.
    """

    model_config = ConfigDict(frozen=True)

    self_run: float = Field(default=0.0, ge=0, le=1.0, description="Fraction run by the operator")
    leased: float = Field(default=0.75, ge=0, le=1.0, description="Fraction leased out")
    inactive: float = Field(default=0.25, ge=0, le=1.0, description="Fraction left idle")

    @model_validator(mode="after")
    def _fractions_sum_to_one(self) -> "DistributionConfig":
        total = self.self_run + self.leased + self.inactive
        if abs(total - 1.0) > DISTRIBUTION_TOLERANCE:
            raise ValueError(
                f"self_run + leased + inactive must equal 1.0 (got {total:.6f})"
            )
        return self

    @classmethod
    def from_counts(cls, self_run: int, leased: int, inactive: int) -> "DistributionConfig":
        """Build from per-node license counts, e.g. ``(0, 150, 50)`` for a 200-license node."""
        total = self_run + leased + inactive
        if total <= 0 or min(self_run, leased, inactive) < 0:
            raise ValueError(
                f"license counts must be non-negative with a positive total "
                f"(got {self_run}/{leased}/{inactive})"
            )
        return cls(
            self_run=self_run / total,
            leased=leased / total,
            inactive=inactive / total,
        )

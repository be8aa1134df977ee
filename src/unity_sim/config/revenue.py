"""Revenue model — per-license earnings, lease split and uptime."""

from pydantic import BaseModel, ConfigDict, Field


class RevenueConfig(BaseModel):
    """Revenue inputs.

    ``revenue_per_license`` is already net of network fees: a self-run license
    earns all of it, a leased license earns ``lease_split`` of it.
    """

    model_config = ConfigDict(frozen=True)

    revenue_per_license: float = Field(
        default=75.0, ge=0,
        description="Monthly revenue of one fully active license (USD).",
    )
    lease_split: float = Field(
        default=0.40, ge=0, le=1.0,
        description="Share of a leased license's revenue paid to the node operator (0–1).",
    )
    uptime_self_run: float = Field(
        default=1.0, ge=0, le=1.0,
        description="Fraction of the month a self-run license is online and earning.",
    )
    uptime_leased: float = Field(
        default=1.0, ge=0, le=1.0,
        description="Fraction of the month a leased license is online and earning.",
    )

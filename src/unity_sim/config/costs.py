"""Operating costs — phones, SIM plans and network credits."""

from pydantic import BaseModel, ConfigDict, Field


class CostConfig(BaseModel):
    """Cost inputs for self-run licenses and network credits."""

    model_config = ConfigDict(frozen=True)

    phone_unit_cost: float = Field(
        default=80.0, ge=0,
        description="One-time phone purchase per self-run license (CapEx).",
    )
    sim_monthly_cost: float = Field(
        default=10.0, ge=0,
        description="Monthly SIM plan per active self-run license. Leased licenses never incur it.",
    )
    credit_monthly_cost: float = Field(
        default=1.99, ge=0,
        description="Monthly network credit cost per active license.",
    )
    operator_pays_credits: bool = Field(
        default=True,
        description="If True the operator pays credits for every active license "
                    "(self-run and leased). If False, no credit cost is charged.",
    )
    hardware_amortization_months: int = Field(
        default=1, ge=1, le=36,
        description="Months over which each batch of phones is expensed, starting "
                    "the month the batch goes live. 1 = charged immediately, so a license "
                    "fully active by month M has paid its whole phone by month M. With N > 1 "
                    "the last batch is only fully paid by month M + N − 1.",
    )

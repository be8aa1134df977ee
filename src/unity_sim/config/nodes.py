"""Node fleet — how many nodes and how many licenses each carries."""

from pydantic import BaseModel, ConfigDict, Field


class NodeConfig(BaseModel):
    """Fleet size inputs."""

    model_config = ConfigDict(frozen=True)

    node_count: int = Field(default=4, ge=0, description="Nodes owned by the operator")
    licenses_per_node: int = Field(default=200, ge=1, description="License NFTs bundled with each node")
    node_unit_cost: float = Field(
        default=5_000.0, ge=0,
        description="One-time purchase price per node. Charged in full at month 0.",
    )

"""Facilitator configuration models."""

from typing import Any

from pydantic import Field

from facilitator.resolution.models.base import ChainModel


class ChainConfig(ChainModel):
    """Connection and worker settings for one chain."""

    worker: str = Field(..., description="Worker account address")
    password: str | None = Field(default=None, description="Worker keystore password")
    node_rpc: str | None = Field(default=None, description="Chain node RPC endpoint")
    sub_graph_ws: str | None = Field(default=None, description="Subgraph websocket endpoint")
    sub_graph_rpc: str | None = Field(default=None, description="Subgraph RPC endpoint")


class DBConfig(ChainModel):
    """Facilitator database location."""

    path: str | None = Field(default=None, description="Database file path")


class FacilitatorConfig(ChainModel):
    """Facilitator-specific configuration for one origin/auxiliary pair."""

    origin_chain: str = Field(..., description="Origin chain id")
    aux_chain_id: int = Field(..., description="Auxiliary chain id")
    database: DBConfig = Field(default_factory=DBConfig, description="Database settings")
    chains: dict[str, ChainConfig] = Field(
        default_factory=dict,
        description="Per-chain settings keyed by chain id",
    )
    encrypted_accounts: dict[str, Any] = Field(
        default_factory=dict,
        description="Encrypted worker keystores keyed by address",
    )

    def has_chain(self, chain_id: str | int) -> bool:
        """Check whether chains contains an entry for the given chain id."""
        return str(chain_id) in self.chains

"""Gateway configuration models."""

from pydantic import Field

from facilitator.resolution.models.base import ChainModel
from facilitator.resolution.models.mosaic import MosaicConfig


class GatewayOriginContracts(ChainModel):
    """Gateway contracts on the origin chain."""

    value_token_address: str | None = None
    base_token_address: str | None = None
    stake_pool_address: str | None = None
    gateway_organization_address: str | None = None
    eip20_gateway_address: str | None = Field(default=None, alias="eip20GatewayAddress")


class GatewayAuxiliaryContracts(ChainModel):
    """Gateway contracts on the auxiliary chain."""

    utility_token_address: str | None = None
    redeem_pool_address: str | None = None
    co_gateway_organization_address: str | None = None
    eip20_co_gateway_address: str | None = Field(
        default=None, alias="eip20CoGatewayAddress"
    )


class GatewayConfig(ChainModel):
    """Gateway-scoped configuration bundle.

    The embedded mosaic_config is the source of truth for the gateway's
    origin and auxiliary anchors.
    """

    mosaic_config: MosaicConfig
    aux_chain_id: int = Field(..., description="Auxiliary chain the gateway serves")
    gateway_address: str | None = Field(default=None, description="Origin gateway address")
    origin_contracts: GatewayOriginContracts = Field(default_factory=GatewayOriginContracts)
    auxiliary_contracts: GatewayAuxiliaryContracts = Field(
        default_factory=GatewayAuxiliaryContracts
    )

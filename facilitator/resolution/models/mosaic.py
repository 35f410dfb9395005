"""Mosaic registry configuration models.

A MosaicConfig is the registry's view of one origin chain and the
auxiliary chains anchored to it, with the contracts deployed for each
origin/auxiliary pair.
"""

from pydantic import Field

from facilitator.resolution.models.base import ChainModel


class OriginContracts(ChainModel):
    """Contracts deployed on the origin chain for one auxiliary chain."""

    simple_token_address: str | None = None
    base_token_address: str | None = None
    anchor_address: str | None = None
    stake_pool_address: str | None = None
    ost_eip20_gateway_address: str | None = Field(
        default=None, alias="ostEIP20GatewayAddress"
    )


class AuxiliaryContracts(ChainModel):
    """Contracts deployed on the auxiliary chain."""

    ost_prime_address: str | None = None
    anchor_address: str | None = None
    redeem_pool_address: str | None = None
    ost_eip20_cogateway_address: str | None = Field(
        default=None, alias="ostEIP20CogatewayAddress"
    )


class AuxiliaryContractAddresses(ChainModel):
    """Contract addresses on both sides of an origin/auxiliary pair."""

    origin: OriginContracts = Field(default_factory=OriginContracts)
    auxiliary: AuxiliaryContracts = Field(default_factory=AuxiliaryContracts)


class AuxiliaryChainConfig(ChainModel):
    """One auxiliary chain entry of the registry."""

    chain_id: int = Field(..., description="Auxiliary chain id")
    contract_addresses: AuxiliaryContractAddresses = Field(
        default_factory=AuxiliaryContractAddresses
    )


class OriginChainConfig(ChainModel):
    """The origin chain of the registry."""

    chain: str = Field(..., description="Origin chain id")
    contract_addresses: dict[str, str | None] = Field(default_factory=dict)


class MosaicConfig(ChainModel):
    """Registry snapshot of one origin chain and its auxiliary chains."""

    origin_chain: OriginChainConfig
    auxiliary_chains: dict[int, AuxiliaryChainConfig] = Field(default_factory=dict)

    def has_auxiliary_chain(self, aux_chain_id: int) -> bool:
        """Check whether the auxiliary chain is registered."""
        return aux_chain_id in self.auxiliary_chains

"""Derivation of gateway contract addresses."""

from facilitator.resolution.errors import ChainNotFoundError
from facilitator.resolution.models import (
    AuxiliaryChainConfig,
    GatewayAddresses,
    GatewayConfig,
    MosaicConfig,
)


class GatewayAddressResolver:
    """Derives GatewayAddresses from a mosaic config or a gateway config.

    Stateless: results depend only on the arguments.
    """

    def from_mosaic_config(
        self,
        mosaic_config: MosaicConfig,
        aux_chain_id: int,
    ) -> GatewayAddresses:
        """Read the addresses of one auxiliary chain of a mosaic config.

        Raises:
            ChainNotFoundError: If the auxiliary chain is not registered
        """
        aux_chain = self._auxiliary_chain(mosaic_config, aux_chain_id)
        origin = aux_chain.contract_addresses.origin
        auxiliary = aux_chain.contract_addresses.auxiliary

        return GatewayAddresses(
            stake_pool_address=origin.stake_pool_address,
            redeem_pool_address=auxiliary.redeem_pool_address,
            eip20_gateway_address=origin.ost_eip20_gateway_address,
            origin_anchor_address=origin.anchor_address,
            eip20_co_gateway_address=auxiliary.ost_eip20_cogateway_address,
            auxiliary_anchor_address=auxiliary.anchor_address,
            utility_token_address=auxiliary.ost_prime_address,
            value_token_address=origin.simple_token_address,
        )

    def from_gateway_config(self, gateway_config: GatewayConfig) -> GatewayAddresses:
        """Combine a gateway's own contracts with the anchors of its mosaic config.

        Raises:
            ChainNotFoundError: If the gateway's auxiliary chain is absent
                from its embedded mosaic config
        """
        aux_chain = self._auxiliary_chain(
            gateway_config.mosaic_config, gateway_config.aux_chain_id
        )
        anchors = aux_chain.contract_addresses
        origin = gateway_config.origin_contracts
        auxiliary = gateway_config.auxiliary_contracts

        return GatewayAddresses(
            stake_pool_address=origin.stake_pool_address,
            redeem_pool_address=auxiliary.redeem_pool_address,
            eip20_gateway_address=origin.eip20_gateway_address,
            origin_anchor_address=anchors.origin.anchor_address,
            eip20_co_gateway_address=auxiliary.eip20_co_gateway_address,
            auxiliary_anchor_address=anchors.auxiliary.anchor_address,
            utility_token_address=auxiliary.utility_token_address,
            value_token_address=origin.value_token_address,
        )

    @staticmethod
    def _auxiliary_chain(
        mosaic_config: MosaicConfig, aux_chain_id: int
    ) -> AuxiliaryChainConfig:
        aux_chain = mosaic_config.auxiliary_chains.get(aux_chain_id)
        if aux_chain is None:
            raise ChainNotFoundError(
                f"auxiliary chain {aux_chain_id} is not registered for origin chain "
                f"{mosaic_config.origin_chain.chain}"
            )
        return aux_chain

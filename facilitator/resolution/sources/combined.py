"""Combined loader for a facilitator file paired with a mosaic or gateway file."""

from facilitator.observability.logging import get_logger
from facilitator.resolution.addresses import GatewayAddressResolver
from facilitator.resolution.models import ConfigType, ResolvedConfig
from facilitator.resolution.source import (
    CombinedConfigSource,
    FacilitatorSource,
    GatewaySource,
    MosaicSource,
)

logger = get_logger(__name__)


class PairedFileConfigSource(CombinedConfigSource):
    """Builds a ResolvedConfig from two files authored together.

    The pair is trusted as a unit: addresses are derived for the
    facilitator file's own auxiliary chain (mosaic files) or from the
    gateway file itself (gateway files).
    """

    def __init__(
        self,
        facilitator_source: FacilitatorSource,
        mosaic_source: MosaicSource,
        gateway_source: GatewaySource,
        address_resolver: GatewayAddressResolver,
    ) -> None:
        self._facilitator_source = facilitator_source
        self._mosaic_source = mosaic_source
        self._gateway_source = gateway_source
        self._address_resolver = address_resolver

    def from_files(
        self,
        facilitator_config_path: str,
        config_path: str,
        config_type: ConfigType,
    ) -> ResolvedConfig:
        facilitator = self._facilitator_source.from_file(facilitator_config_path)

        if config_type == ConfigType.MOSAIC:
            mosaic_config = self._mosaic_source.from_file(config_path)
            gateway_addresses = self._address_resolver.from_mosaic_config(
                mosaic_config, facilitator.aux_chain_id
            )
        elif config_type == ConfigType.GATEWAY:
            gateway_config = self._gateway_source.from_file(config_path)
            gateway_addresses = self._address_resolver.from_gateway_config(gateway_config)
        else:
            raise ValueError(f"Unsupported config type: {config_type}")

        logger.info(
            "paired_config_files_loaded",
            facilitator_config_path=facilitator_config_path,
            config_path=config_path,
            config_type=config_type.value,
        )

        return ResolvedConfig(facilitator=facilitator, gateway_addresses=gateway_addresses)

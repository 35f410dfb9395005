"""ConfigResolver factory for creating configured instances.

Wires the filesystem sources from settings so a process can resolve its
configuration from the ids and paths in its own settings.
"""

from facilitator.config.settings import Settings
from facilitator.observability.logging import get_logger
from facilitator.resolution.addresses import GatewayAddressResolver
from facilitator.resolution.models import ChainIdentifierInput, ResolvedConfig
from facilitator.resolution.resolver import ConfigResolver
from facilitator.resolution.sources import (
    FileFacilitatorSource,
    FileGatewaySource,
    FileMosaicSource,
    PairedFileConfigSource,
)

logger = get_logger(__name__)


def create_config_resolver(settings: Settings) -> ConfigResolver:
    """Create a ConfigResolver reading files and the registry directory.

    Args:
        settings: Settings providing the registry location

    Returns:
        Resolver backed by filesystem sources
    """
    address_resolver = GatewayAddressResolver()
    facilitator_source = FileFacilitatorSource(settings.registry)
    mosaic_source = FileMosaicSource(settings.registry)
    gateway_source = FileGatewaySource()

    logger.info(
        "creating_config_resolver",
        mosaic_dir=str(settings.registry.mosaic_dir),
    )

    return ConfigResolver(
        facilitator_source=facilitator_source,
        mosaic_source=mosaic_source,
        gateway_source=gateway_source,
        combined_source=PairedFileConfigSource(
            facilitator_source, mosaic_source, gateway_source, address_resolver
        ),
        address_resolver=address_resolver,
    )


def chain_identifiers_from_settings(settings: Settings) -> ChainIdentifierInput:
    """Build the chain id input from settings."""
    return ChainIdentifierInput(
        origin_chain_id=settings.origin_chain_id,
        aux_chain_id=settings.aux_chain_id,
    )


def resolve_from_settings(
    settings: Settings, resolver: ConfigResolver | None = None
) -> ResolvedConfig:
    """Resolve the configuration named by settings.

    Args:
        settings: Settings holding chain ids and config file paths
        resolver: Resolver to use; a filesystem-backed one by default
    """
    resolver = resolver or create_config_resolver(settings)
    return resolver.resolve(
        chain_identifiers_from_settings(settings),
        mosaic_config_path=settings.mosaic_config_path,
        facilitator_config_path=settings.facilitator_config_path,
        gateway_config_path=settings.gateway_config_path,
    )

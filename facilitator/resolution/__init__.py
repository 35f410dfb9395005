"""Configuration resolution for the facilitator.

Usage:
    from facilitator.resolution import ChainIdentifierInput, create_config_resolver

    resolver = create_config_resolver(get_settings())
    config = resolver.resolve(
        ChainIdentifierInput(origin_chain_id="2", aux_chain_id=3),
        facilitator_config_path="facilitator-config.json",
    )
"""

from facilitator.resolution.addresses import GatewayAddressResolver
from facilitator.resolution.errors import (
    ChainMismatchError,
    ChainNotFoundError,
    ConfigFileNotFoundError,
    ConfigResolutionError,
    ConfigSourceError,
    InvalidChainInputError,
    InvalidConfigFileError,
    ResolutionErrorCode,
)
from facilitator.resolution.factory import (
    chain_identifiers_from_settings,
    create_config_resolver,
    resolve_from_settings,
)
from facilitator.resolution.models import (
    ChainIdentifierInput,
    ConfigType,
    FacilitatorConfig,
    GatewayAddresses,
    GatewayConfig,
    MosaicConfig,
    ResolutionMode,
    ResolvedConfig,
)
from facilitator.resolution.resolver import ConfigResolver, ResolutionRequest, select_mode
from facilitator.resolution.source import (
    CombinedConfigSource,
    FacilitatorSource,
    GatewaySource,
    MosaicSource,
)

__all__ = [
    "ChainIdentifierInput",
    "ChainMismatchError",
    "ChainNotFoundError",
    "CombinedConfigSource",
    "ConfigFileNotFoundError",
    "ConfigResolutionError",
    "ConfigResolver",
    "ConfigSourceError",
    "ConfigType",
    "FacilitatorConfig",
    "FacilitatorSource",
    "GatewayAddressResolver",
    "GatewayAddresses",
    "GatewayConfig",
    "GatewaySource",
    "InvalidChainInputError",
    "InvalidConfigFileError",
    "MosaicConfig",
    "MosaicSource",
    "ResolutionErrorCode",
    "ResolutionMode",
    "ResolutionRequest",
    "ResolvedConfig",
    "chain_identifiers_from_settings",
    "create_config_resolver",
    "resolve_from_settings",
    "select_mode",
]

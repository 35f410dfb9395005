"""Resolution model exports.

    from facilitator.resolution.models import FacilitatorConfig, MosaicConfig
"""

from facilitator.resolution.models.facilitator import (
    ChainConfig,
    DBConfig,
    FacilitatorConfig,
)
from facilitator.resolution.models.gateway import (
    GatewayAuxiliaryContracts,
    GatewayConfig,
    GatewayOriginContracts,
)
from facilitator.resolution.models.mosaic import (
    AuxiliaryChainConfig,
    AuxiliaryContractAddresses,
    AuxiliaryContracts,
    MosaicConfig,
    OriginChainConfig,
    OriginContracts,
)
from facilitator.resolution.models.resolution import (
    ChainIdentifierInput,
    ConfigType,
    GatewayAddresses,
    ResolutionMode,
    ResolvedConfig,
)

__all__ = [
    "AuxiliaryChainConfig",
    "AuxiliaryContractAddresses",
    "AuxiliaryContracts",
    "ChainConfig",
    "ChainIdentifierInput",
    "ConfigType",
    "DBConfig",
    "FacilitatorConfig",
    "GatewayAddresses",
    "GatewayAuxiliaryContracts",
    "GatewayConfig",
    "GatewayOriginContracts",
    "MosaicConfig",
    "OriginChainConfig",
    "OriginContracts",
    "ResolutionMode",
    "ResolvedConfig",
]

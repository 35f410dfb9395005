"""Test factories for building chain configuration models."""

from tests.factories.chains import (
    FacilitatorConfigFactory,
    GatewayConfigFactory,
    MosaicConfigFactory,
)

__all__ = [
    "FacilitatorConfigFactory",
    "GatewayConfigFactory",
    "MosaicConfigFactory",
]

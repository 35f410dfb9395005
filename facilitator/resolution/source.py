"""Config source abstract interfaces.

The resolver reaches files and the chain registry only through these
interfaces, so lookups can be swapped for test doubles or other backends.
"""

from abc import ABC, abstractmethod

from facilitator.resolution.models import (
    ConfigType,
    FacilitatorConfig,
    GatewayConfig,
    MosaicConfig,
    ResolvedConfig,
)


class FacilitatorSource(ABC):
    """Loads facilitator configs from files or the registry."""

    @abstractmethod
    def from_file(self, path: str) -> FacilitatorConfig:
        """Load a facilitator config from a file."""
        pass

    @abstractmethod
    def from_chain(self, aux_chain_id: int) -> FacilitatorConfig:
        """Load the facilitator config registered for an auxiliary chain."""
        pass


class MosaicSource(ABC):
    """Loads mosaic registry snapshots from files or the registry."""

    @abstractmethod
    def from_file(self, path: str) -> MosaicConfig:
        """Load a mosaic config from a file."""
        pass

    @abstractmethod
    def from_chain(self, origin_chain_id: str) -> MosaicConfig:
        """Load the mosaic config registered for an origin chain."""
        pass

    @abstractmethod
    def exists(self, origin_chain_id: str) -> bool:
        """Check whether the registry holds a mosaic config for an origin chain."""
        pass


class GatewaySource(ABC):
    """Loads gateway configs from files."""

    @abstractmethod
    def from_file(self, path: str) -> GatewayConfig:
        """Load a gateway config from a file."""
        pass


class CombinedConfigSource(ABC):
    """Builds a resolved config from a pair of mutually authored files."""

    @abstractmethod
    def from_files(
        self,
        facilitator_config_path: str,
        config_path: str,
        config_type: ConfigType,
    ) -> ResolvedConfig:
        """Load a facilitator file together with a mosaic or gateway file.

        Args:
            facilitator_config_path: Facilitator config file
            config_path: Mosaic or gateway config file
            config_type: Which kind of file config_path is
        """
        pass

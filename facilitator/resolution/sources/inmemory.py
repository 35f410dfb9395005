"""In-memory implementations of the config sources."""

from facilitator.resolution.errors import ConfigFileNotFoundError
from facilitator.resolution.models import FacilitatorConfig, GatewayConfig, MosaicConfig
from facilitator.resolution.source import FacilitatorSource, GatewaySource, MosaicSource


class InMemoryFacilitatorSource(FacilitatorSource):
    """In-memory FacilitatorSource for testing and embedding."""

    def __init__(self) -> None:
        self._files: dict[str, FacilitatorConfig] = {}
        self._chains: dict[int, FacilitatorConfig] = {}

    def add_file(self, path: str, config: FacilitatorConfig) -> None:
        """Make a config available under a file path."""
        self._files[path] = config

    def register(self, aux_chain_id: int, config: FacilitatorConfig) -> None:
        """Register a config for an auxiliary chain."""
        self._chains[aux_chain_id] = config

    def from_file(self, path: str) -> FacilitatorConfig:
        config = self._files.get(path)
        if config is None:
            raise ConfigFileNotFoundError(f"Config file not found: {path}", path=path)
        return config

    def from_chain(self, aux_chain_id: int) -> FacilitatorConfig:
        config = self._chains.get(aux_chain_id)
        if config is None:
            raise ConfigFileNotFoundError(
                f"Facilitator config not registered for aux chain {aux_chain_id}"
            )
        return config


class InMemoryMosaicSource(MosaicSource):
    """In-memory MosaicSource for testing and embedding."""

    def __init__(self) -> None:
        self._files: dict[str, MosaicConfig] = {}
        self._chains: dict[str, MosaicConfig] = {}

    def add_file(self, path: str, config: MosaicConfig) -> None:
        """Make a config available under a file path."""
        self._files[path] = config

    def register(self, config: MosaicConfig) -> None:
        """Register a config under its own origin chain."""
        self._chains[config.origin_chain.chain] = config

    def from_file(self, path: str) -> MosaicConfig:
        config = self._files.get(path)
        if config is None:
            raise ConfigFileNotFoundError(f"Config file not found: {path}", path=path)
        return config

    def from_chain(self, origin_chain_id: str) -> MosaicConfig:
        config = self._chains.get(origin_chain_id)
        if config is None:
            raise ConfigFileNotFoundError(
                f"Mosaic config not registered for origin chain {origin_chain_id}"
            )
        return config

    def exists(self, origin_chain_id: str) -> bool:
        return origin_chain_id in self._chains


class InMemoryGatewaySource(GatewaySource):
    """In-memory GatewaySource for testing and embedding."""

    def __init__(self) -> None:
        self._files: dict[str, GatewayConfig] = {}

    def add_file(self, path: str, config: GatewayConfig) -> None:
        """Make a config available under a file path."""
        self._files[path] = config

    def from_file(self, path: str) -> GatewayConfig:
        config = self._files.get(path)
        if config is None:
            raise ConfigFileNotFoundError(f"Config file not found: {path}", path=path)
        return config

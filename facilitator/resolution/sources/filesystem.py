"""Filesystem implementations of the config sources.

Files are JSON documents in the mosaic tooling's camelCase layout. Registry
lookups resolve to files under the configured mosaic data directory.
"""

from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from facilitator.config.models.registry import RegistryConfig
from facilitator.observability.logging import get_logger
from facilitator.resolution.errors import (
    ConfigFileNotFoundError,
    ConfigSourceError,
    InvalidConfigFileError,
)
from facilitator.resolution.models import FacilitatorConfig, GatewayConfig, MosaicConfig
from facilitator.resolution.source import FacilitatorSource, GatewaySource, MosaicSource

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_model_file(path: Path, model: type[ModelT]) -> ModelT:
    """Read a JSON file and validate it into a model.

    Raises:
        ConfigFileNotFoundError: If the file doesn't exist
        InvalidConfigFileError: If the content is not valid JSON for the model
        ConfigSourceError: If the file cannot be read
    """
    if not path.is_file():
        raise ConfigFileNotFoundError(f"Config file not found: {path}", path=str(path))

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigSourceError(f"Cannot read config file {path}: {exc}", path=str(path)) from exc

    try:
        loaded = model.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidConfigFileError(
            f"Invalid {model.__name__} in {path}: {exc}", path=str(path)
        ) from exc

    logger.debug("config_file_loaded", path=str(path), model=model.__name__)
    return loaded


class FileFacilitatorSource(FacilitatorSource):
    """Facilitator configs from files and the registry directory."""

    def __init__(self, registry: RegistryConfig) -> None:
        self._registry = registry

    def path_for_chain(self, aux_chain_id: int) -> Path:
        """Registry location of the facilitator config for an auxiliary chain."""
        return (
            self._registry.mosaic_dir
            / str(aux_chain_id)
            / self._registry.facilitator_file_name
        )

    def from_file(self, path: str) -> FacilitatorConfig:
        return load_model_file(Path(path), FacilitatorConfig)

    def from_chain(self, aux_chain_id: int) -> FacilitatorConfig:
        return load_model_file(self.path_for_chain(aux_chain_id), FacilitatorConfig)


class FileMosaicSource(MosaicSource):
    """Mosaic configs from files and the registry directory."""

    def __init__(self, registry: RegistryConfig) -> None:
        self._registry = registry

    def path_for_chain(self, origin_chain_id: str) -> Path:
        """Registry location of the mosaic config for an origin chain."""
        return self._registry.mosaic_dir / origin_chain_id / self._registry.mosaic_file_name

    def from_file(self, path: str) -> MosaicConfig:
        return load_model_file(Path(path), MosaicConfig)

    def from_chain(self, origin_chain_id: str) -> MosaicConfig:
        return load_model_file(self.path_for_chain(origin_chain_id), MosaicConfig)

    def exists(self, origin_chain_id: str) -> bool:
        return self.path_for_chain(origin_chain_id).is_file()


class FileGatewaySource(GatewaySource):
    """Gateway configs from files."""

    def from_file(self, path: str) -> GatewayConfig:
        return load_model_file(Path(path), GatewayConfig)

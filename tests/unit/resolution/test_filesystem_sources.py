"""Tests for filesystem config sources."""

from pathlib import Path

import pytest

from facilitator.config.models.registry import RegistryConfig
from facilitator.resolution.errors import (
    ConfigFileNotFoundError,
    ConfigSourceError,
    InvalidConfigFileError,
)
from facilitator.resolution.models import FacilitatorConfig, GatewayConfig, MosaicConfig
from facilitator.resolution.sources.filesystem import (
    FileFacilitatorSource,
    FileGatewaySource,
    FileMosaicSource,
    load_model_file,
)


def write_json(path: Path, model: FacilitatorConfig | MosaicConfig | GatewayConfig) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(model.model_dump_json(by_alias=True))
    return path


@pytest.fixture
def registry(tmp_path: Path) -> RegistryConfig:
    mosaic_dir = tmp_path / ".mosaic"
    mosaic_dir.mkdir()
    return RegistryConfig(mosaic_dir=mosaic_dir)


class TestLoadModelFile:
    """Tests for load_model_file."""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileNotFoundError) as exc_info:
            load_model_file(tmp_path / "missing.json", MosaicConfig)
        assert exc_info.value.path == str(tmp_path / "missing.json")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileNotFoundError):
            load_model_file(tmp_path, MosaicConfig)

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(InvalidConfigFileError, match="Invalid MosaicConfig"):
            load_model_file(path, MosaicConfig)

    def test_structurally_invalid_document_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "facilitator.json"
        path.write_text('{"originChain": "2"}')

        with pytest.raises(InvalidConfigFileError):
            load_model_file(path, FacilitatorConfig)

    def test_source_errors_share_base(self) -> None:
        assert issubclass(ConfigFileNotFoundError, ConfigSourceError)
        assert issubclass(InvalidConfigFileError, ConfigSourceError)


class TestFileFacilitatorSource:
    """Tests for FileFacilitatorSource."""

    def test_from_file(self, tmp_path: Path, registry: RegistryConfig, facilitator_config) -> None:
        path = write_json(tmp_path / "facilitator-config.json", facilitator_config)

        loaded = FileFacilitatorSource(registry).from_file(str(path))

        assert loaded == facilitator_config

    def test_from_chain_reads_aux_chain_directory(
        self, registry: RegistryConfig, facilitator_config
    ) -> None:
        write_json(registry.mosaic_dir / "3" / "facilitator-config.json", facilitator_config)
        source = FileFacilitatorSource(registry)

        assert source.path_for_chain(3) == registry.mosaic_dir / "3" / "facilitator-config.json"
        assert source.from_chain(3) == facilitator_config

    def test_from_chain_missing_raises(self, registry: RegistryConfig) -> None:
        with pytest.raises(ConfigFileNotFoundError):
            FileFacilitatorSource(registry).from_chain(3)

    def test_custom_file_name(self, tmp_path: Path, facilitator_config) -> None:
        registry = RegistryConfig(mosaic_dir=tmp_path, facilitator_file_name="fc.json")
        write_json(tmp_path / "3" / "fc.json", facilitator_config)

        assert FileFacilitatorSource(registry).from_chain(3) == facilitator_config


class TestFileMosaicSource:
    """Tests for FileMosaicSource."""

    def test_from_file(self, tmp_path: Path, registry: RegistryConfig, mosaic_config) -> None:
        path = write_json(tmp_path / "mosaic.json", mosaic_config)

        assert FileMosaicSource(registry).from_file(str(path)) == mosaic_config

    def test_exists_and_from_chain(self, registry: RegistryConfig, mosaic_config) -> None:
        source = FileMosaicSource(registry)
        assert source.exists("2") is False

        write_json(registry.mosaic_dir / "2" / "mosaic.json", mosaic_config)

        assert source.exists("2") is True
        assert source.from_chain("2") == mosaic_config

    def test_from_chain_missing_raises(self, registry: RegistryConfig) -> None:
        with pytest.raises(ConfigFileNotFoundError):
            FileMosaicSource(registry).from_chain("2")


class TestFileGatewaySource:
    """Tests for FileGatewaySource."""

    def test_from_file(self, tmp_path: Path, gateway_config) -> None:
        path = write_json(tmp_path / "gateway-config.json", gateway_config)

        loaded = FileGatewaySource().from_file(str(path))

        assert loaded == gateway_config
        assert loaded.mosaic_config.has_auxiliary_chain(3)

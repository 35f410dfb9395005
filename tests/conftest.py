"""Shared test fixtures for the facilitator test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from facilitator.resolution.models import FacilitatorConfig, GatewayConfig, MosaicConfig
from tests.factories.chains import (
    FacilitatorConfigFactory,
    GatewayConfigFactory,
    MosaicConfigFactory,
)


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            toml_file = test_config_dir / filename
            toml_file.write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    from facilitator.config import get_settings
    from facilitator.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def facilitator_config() -> FacilitatorConfig:
    """Facilitator config for the default origin/aux pair."""
    return FacilitatorConfigFactory.create()


@pytest.fixture
def mosaic_config() -> MosaicConfig:
    """Mosaic config for the default origin chain with one aux chain."""
    return MosaicConfigFactory.create()


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Gateway config for the default aux chain."""
    return GatewayConfigFactory.create()

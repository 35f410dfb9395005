"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from facilitator.config.loader import (
    config_layers,
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_flat_dicts(self) -> None:
        """Flat dictionaries are merged correctly."""
        base = {"a": 1, "b": 2}
        override = {"b": 3, "c": 4}
        result = deep_merge(base, override)
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self) -> None:
        """Nested dictionaries are merged recursively."""
        base = {"registry": {"mosaic_dir": "/a", "mosaic_file_name": "mosaic.json"}}
        override = {"registry": {"mosaic_dir": "/b"}}
        result = deep_merge(base, override)
        assert result == {"registry": {"mosaic_dir": "/b", "mosaic_file_name": "mosaic.json"}}

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict values in override replace base values."""
        result = deep_merge({"a": {"x": 1}}, {"a": "replaced"})
        assert result == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        """Original base dictionary is not modified."""
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        """Valid TOML file is loaded correctly."""
        toml_file = tmp_path / "test.toml"
        toml_file.write_text('origin_chain_id = "2"\naux_chain_id = 3')

        result = load_toml(toml_file)
        assert result == {"origin_chain_id": "2", "aux_chain_id": 3}

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Invalid TOML syntax raises error."""
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    """Tests for get_environment function."""

    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns FACILITATOR_ENV value when set."""
        monkeypatch.setenv("FACILITATOR_ENV", "production")
        assert get_environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults to 'development' when FACILITATOR_ENV not set."""
        monkeypatch.delenv("FACILITATOR_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_uses_env_var_when_set(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Uses FACILITATOR_CONFIG_DIR when set."""
        monkeypatch.setenv("FACILITATOR_CONFIG_DIR", str(test_config_dir))
        assert get_config_dir() == test_config_dir

    def test_raises_for_missing_env_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Raises error when FACILITATOR_CONFIG_DIR doesn't exist."""
        monkeypatch.setenv("FACILITATOR_CONFIG_DIR", str(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            get_config_dir()

    def test_finds_config_dir_in_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Walks up from the working directory to find config/."""
        (tmp_path / "config").mkdir()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.delenv("FACILITATOR_CONFIG_DIR", raising=False)
        monkeypatch.chdir(nested)

        assert get_config_dir() == tmp_path / "config"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_default_config(
        self, mock_toml_files, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Loads default.toml configuration."""
        mock_toml_files({"default.toml": "app_name = 'test'\ndebug = false"})
        monkeypatch.setenv("FACILITATOR_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("FACILITATOR_ENV", "nonexistent")

        assert load_config() == {"app_name": "test", "debug": False}

    def test_merges_environment_config(
        self, mock_toml_files, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Environment config overrides default config."""
        mock_toml_files({
            "default.toml": "app_name = 'test'\n[registry]\nmosaic_file_name = 'mosaic.json'",
            "production.toml": "[registry]\nmosaic_file_name = 'prod.json'",
        })
        monkeypatch.setenv("FACILITATOR_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("FACILITATOR_ENV", "production")

        result = load_config()
        assert result == {"app_name": "test", "registry": {"mosaic_file_name": "prod.json"}}

    def test_missing_default_raises(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Missing default.toml raises error."""
        monkeypatch.setenv("FACILITATOR_CONFIG_DIR", str(test_config_dir))

        with pytest.raises(FileNotFoundError, match="default.toml"):
            load_config()


class TestConfigLayers:
    """Tests for config_layers function."""

    def test_default_only(self, mock_toml_files, test_config_dir: Path) -> None:
        """Only default.toml is used when the environment file is absent."""
        mock_toml_files({"default.toml": ""})

        assert config_layers(test_config_dir, "staging") == [test_config_dir / "default.toml"]

    def test_environment_layer_follows_default(
        self, mock_toml_files, test_config_dir: Path
    ) -> None:
        """The environment file is loaded after default.toml."""
        mock_toml_files({"default.toml": "", "staging.toml": ""})

        assert config_layers(test_config_dir, "staging") == [
            test_config_dir / "default.toml",
            test_config_dir / "staging.toml",
        ]

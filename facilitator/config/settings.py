"""Root settings model for facilitator configuration."""

from typing import Any

from pydantic import Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from facilitator.config.models.observability import ObservabilityConfig
from facilitator.config.models.registry import RegistryConfig

# Merged TOML layers, installed by get_settings() before Settings is built
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Install the merged TOML layers read by subsequent Settings() calls."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the installed TOML layers.

    Only top-level keys naming a Settings field are passed on; nested tables
    are validated by the section models themselves.
    """

    def get_field_value(
        self, field: FieldInfo, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        return _toml_config.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {key: value for key, value in _toml_config.items() if key in fields}


class Settings(BaseSettings):
    """Process-wide facilitator settings.

    Precedence, highest first: constructor arguments, FACILITATOR_*
    environment variables (nested sections joined with "__", e.g.
    FACILITATOR_REGISTRY__MOSAIC_DIR), TOML layers, field defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="FACILITATOR_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="facilitator", description="Application name for logging")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Resolution inputs; each may be left unset
    origin_chain_id: str | None = Field(default=None, description="Origin chain id")
    aux_chain_id: int | None = Field(default=None, description="Auxiliary chain id")
    mosaic_config_path: str | None = Field(default=None, description="Mosaic config file")
    facilitator_config_path: str | None = Field(
        default=None,
        description="Facilitator config file",
    )
    gateway_config_path: str | None = Field(default=None, description="Gateway config file")

    registry: RegistryConfig = Field(
        default_factory=RegistryConfig,
        description="Registry lookup configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Logging and metrics configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

"""Configuration model exports.

    from facilitator.config.models import RegistryConfig, ObservabilityConfig
"""

from facilitator.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from facilitator.config.models.registry import RegistryConfig

__all__ = [
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "RegistryConfig",
]

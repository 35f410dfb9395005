"""Logging and metrics for configuration resolution."""

from facilitator.config.models.observability import ObservabilityConfig
from facilitator.observability.logging import get_logger, setup_logging
from facilitator.observability.metrics import setup_metrics


def setup_observability(config: ObservabilityConfig) -> None:
    """Configure logging, then start the metrics exporter if enabled."""
    setup_logging(
        level=config.logging.level,
        format=config.logging.format,
        redact_secrets=config.logging.redact_secrets,
    )
    setup_metrics(config.metrics)


__all__ = ["get_logger", "setup_logging", "setup_metrics", "setup_observability"]

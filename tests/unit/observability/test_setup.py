"""Tests for setup_observability."""

from unittest.mock import patch

from facilitator.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from facilitator.observability import setup_observability


def test_configures_logging_and_metrics() -> None:
    config = ObservabilityConfig(
        logging=LoggingConfig(level="DEBUG", format="console", redact_secrets=False),
        metrics=MetricsConfig(enabled=True, port=9292),
    )

    with (
        patch("facilitator.observability.setup_logging") as setup_logging,
        patch("facilitator.observability.setup_metrics") as setup_metrics,
    ):
        setup_observability(config)

    setup_logging.assert_called_once_with(level="DEBUG", format="console", redact_secrets=False)
    setup_metrics.assert_called_once_with(config.metrics)


def test_defaults_leave_exporter_stopped() -> None:
    with patch("facilitator.observability.metrics.start_http_server") as start:
        setup_observability(ObservabilityConfig())

    start.assert_not_called()

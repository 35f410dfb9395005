"""Prometheus metrics for configuration resolution."""

from prometheus_client import Counter, Histogram, start_http_server

from facilitator.config.models.observability import MetricsConfig
from facilitator.observability.logging import get_logger

logger = get_logger(__name__)

RESOLUTION_COUNT = Counter(
    "facilitator_config_resolutions_total",
    "Total number of configuration resolutions",
    labelnames=["mode", "outcome"],
)

RESOLUTION_LATENCY = Histogram(
    "facilitator_config_resolution_latency_seconds",
    "Configuration resolution latency in seconds",
    labelnames=["mode"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

SOURCE_LOOKUPS = Counter(
    "facilitator_config_source_lookups_total",
    "Total number of config source lookups",
    labelnames=["source", "kind"],
)


def setup_metrics(config: MetricsConfig) -> bool:
    """Start the Prometheus exporter when metrics are enabled.

    Returns:
        True if the exporter was started
    """
    if not config.enabled:
        return False

    start_http_server(config.port, addr=config.host)
    logger.info("metrics_exporter_started", host=config.host, port=config.port)
    return True

"""Prometheus Metrics - Emission Pack.

Minimum metrics that show whether indexers are being fed:
- events published per channel (standard / legacy) and event type
- encoding failures per event type (nothing was published)
- publish failures per event type (transport raised)
"""

import logging
from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Info, start_http_server

from stellara_events import __version__

logger = logging.getLogger(__name__)


class MetricsCollector:
    """Centralized Prometheus metrics collector.

    Each collector owns its ``CollectorRegistry`` so several emitters (or
    tests) can coexist in one process without duplicate-metric errors.
    """

    def __init__(self, port: int = 8000, registry: Optional[CollectorRegistry] = None):
        self._port = port
        self._started = False
        self.registry = registry or CollectorRegistry()

        # === Emission ===
        self.events_published = Counter(
            'stellara_events_published_total',
            'Events handed to the transport',
            ['channel', 'event_type'],
            registry=self.registry,
        )

        self.encoding_errors = Counter(
            'stellara_encoding_errors_total',
            'Emissions rejected before publish (unrepresentable field)',
            ['event_type'],
            registry=self.registry,
        )

        self.publish_failures = Counter(
            'stellara_publish_failures_total',
            'Emissions whose publish raised',
            ['event_type'],
            registry=self.registry,
        )

        # === Build Info ===
        self.build_info = Info(
            'stellara_events_build',
            'Build information',
            registry=self.registry,
        )

    def record_published(self, channel: str, event_type: str) -> None:
        self.events_published.labels(channel=channel, event_type=event_type).inc()

    def record_encoding_error(self, event_type: str) -> None:
        self.encoding_errors.labels(event_type=event_type).inc()

    def record_publish_failure(self, event_type: str) -> None:
        self.publish_failures.labels(event_type=event_type).inc()

    def value(self, name: str, labels: dict[str, str]) -> float:
        """Current sample value, 0.0 if the series has not been touched."""
        sample = self.registry.get_sample_value(name, labels)
        return sample if sample is not None else 0.0

    def start_server(self):
        """Start Prometheus HTTP server."""
        if self._started:
            return
        try:
            start_http_server(self._port, registry=self.registry)
            self._started = True
            logger.info(f"Prometheus metrics server started on port {self._port}")
        except OSError as e:
            logger.error(f"Failed to start metrics server: {e}")

    def set_build_info(self, version: str, instance_id: str, environment: str):
        """Set build information."""
        self.build_info.info({
            'version': version,
            'instance_id': instance_id,
            'environment': environment,
        })


# Singleton
_metrics: Optional[MetricsCollector] = None

def get_metrics(port: Optional[int] = None) -> MetricsCollector:
    """Process-wide collector; ``port`` defaults to ``prometheus_port``."""
    global _metrics
    if _metrics is None:
        if port is None:
            from stellara_events.config.settings import get_settings

            port = get_settings().prometheus_port
        _metrics = MetricsCollector(port)
    return _metrics


def start_metrics_from_settings() -> Optional[MetricsCollector]:
    """Start the exporter when ``metrics_enabled`` is set.

    Returns the shared collector, or ``None`` when metrics are disabled.
    """
    from stellara_events.config.settings import get_settings

    settings = get_settings()
    if not settings.metrics_enabled:
        logger.info("Prometheus metrics disabled by configuration")
        return None
    metrics = get_metrics(settings.prometheus_port)
    metrics.start_server()
    metrics.set_build_info(__version__, settings.instance_id, settings.environment)
    return metrics

"""Stellara Events -- Observability package.

Prometheus metrics and logging setup.
"""

from stellara_events.observability.log_setup import setup_logging, setup_logging_from_settings
from stellara_events.observability.metrics import (
    MetricsCollector,
    get_metrics,
    start_metrics_from_settings,
)

__all__: list[str] = [
    "MetricsCollector",
    "get_metrics",
    "start_metrics_from_settings",
    "setup_logging",
    "setup_logging_from_settings",
]

from tasmota_exporter.telemetry.metric_scope import MetricScope
from tasmota_exporter.telemetry.snapshot import snapshot_registry

__all__ = ["MetricScope", "snapshot_registry"]

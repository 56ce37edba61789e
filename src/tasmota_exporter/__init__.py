"""Prometheus exporter translating tasmota plug status pages into metrics."""

__version__ = "0.1.0"

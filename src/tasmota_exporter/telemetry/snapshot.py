"""Flatten a prometheus CollectorRegistry into plain values."""

from __future__ import annotations

from loguru import logger
from prometheus_client import CollectorRegistry


def snapshot_registry(registry: CollectorRegistry) -> dict[str, float]:
    """Map every sample name in ``registry`` to its value.

    Only meant for unlabelled metrics. Never raises, a registry that fails to
    collect yields an empty dict.
    """
    values: dict[str, float] = {}

    try:
        families = list(registry.collect())
    except Exception:
        logger.warning("Failed to collect metrics from registry", exc_info=True)
        return values

    for metric_family in families:
        for sample in metric_family.samples:
            values[sample.name] = float(sample.value)

    return values

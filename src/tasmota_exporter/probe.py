from __future__ import annotations

import asyncio
import time

from loguru import logger

from tasmota_exporter import settings
from tasmota_exporter.models.telemetry_models import ProbeOutcome, TasmotaReading
from tasmota_exporter.parser import parse
from tasmota_exporter.probe_client import fetch_status
from tasmota_exporter.telemetry import MetricScope, snapshot_registry


async def _probe_device(target: str, timeout_sec: float) -> TasmotaReading | None:
    payload, ok = await fetch_status(target, timeout_sec=timeout_sec)
    if not ok:
        return None
    return parse(payload.decode("utf-8"))


async def run_probe(target: str, timeout_sec: float | None = None) -> MetricScope:
    """Probe one tasmota target and return a fully bound MetricScope.

    The whole probe, fetch included, is capped at ``timeout_sec`` (defaults to
    ``settings.PROBE_TIMEOUT_SEC``). A failed or timed out probe still yields
    a complete scope with ``probe_success`` at 0 and every reading at zero.
    Cancellation of the calling task is propagated, not converted.
    """
    if timeout_sec is None:
        timeout_sec = settings.PROBE_TIMEOUT_SEC

    scope = MetricScope()
    start = time.perf_counter()
    try:
        reading = await asyncio.wait_for(_probe_device(target, timeout_sec), timeout=timeout_sec)
    except asyncio.TimeoutError:
        logger.warning(f"Probe of tasmota target ({target}) exceeded {timeout_sec}s")
        reading = None
    duration = time.perf_counter() - start

    success = reading is not None
    scope.bind(reading or TasmotaReading(), ProbeOutcome(success=success, duration_seconds=duration))

    if success:
        logger.info(f"{target}: probe succeeded, duration: {duration:f}s")
    else:
        logger.warning(f"{target}: probe failed, duration: {duration:f}s")
    logger.opt(lazy=True).debug(
        "{}: probe values {}", lambda: target, lambda: snapshot_registry(scope.registry)
    )
    return scope

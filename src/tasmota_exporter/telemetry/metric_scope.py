"""Per-probe Prometheus metrics.

Every probe builds its own CollectorRegistry so one target's values never
leak into another target's scrape, and nothing lands on the global
registry (no python_gc_*, process_*, etc.).
"""

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Gauge, generate_latest

from tasmota_exporter.models.telemetry_models import ProbeOutcome, TasmotaReading

PREFIX = "tasmota_"

# TasmotaReading field -> (metric name, help)
READING_GAUGES: dict[str, tuple[str, str]] = {
    "power_state": (f"{PREFIX}on", "Indicates if the tasmota plug is on/off"),
    "voltage": (f"{PREFIX}voltage_volts", "voltage of tasmota plug in volt (V)"),
    "current": (f"{PREFIX}current_amperes", "current of tasmota plug in ampere (A)"),
    "active_power": (f"{PREFIX}power_watts", "current power of tasmota plug in watts (W)"),
    "apparent_power": (
        f"{PREFIX}apparent_power_voltamperes",
        "apparent power of tasmota plug in volt-amperes (VA)",
    ),
    "reactive_power": (
        f"{PREFIX}reactive_power_voltamperesreactive",
        "reactive power of tasmota plug in volt-amperes reactive (VAr)",
    ),
    "power_factor": (f"{PREFIX}power_factor", "current power factor of tasmota plug"),
    "energy_today": (f"{PREFIX}today_kwh_total", "todays energy usage total in kilowatts hours (kWh)"),
    "energy_yesterday": (
        f"{PREFIX}yesterday_kwh_total",
        "yesterdays energy usage total in kilowatts hours (kWh)",
    ),
    "energy_total": (f"{PREFIX}kwh_total", "total energy usage in kilowatts hours (kWh)"),
}

PROBE_SUCCESS = ("probe_success", "Displays whether or not the probe was a success")
PROBE_DURATION_SECONDS = ("probe_duration_seconds", "Returns how long the probe took to complete in seconds")


class MetricScope:
    """Isolated set of gauges for exactly one probe.

    Create one per request, bind the results, render, then drop it.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self) -> None:
        self.registry = CollectorRegistry()
        self._reading_gauges = {
            field: Gauge(name, documentation, registry=self.registry)
            for field, (name, documentation) in READING_GAUGES.items()
        }
        self._success = Gauge(*PROBE_SUCCESS, registry=self.registry)
        self._duration = Gauge(*PROBE_DURATION_SECONDS, registry=self.registry)

    def bind(self, reading: TasmotaReading, outcome: ProbeOutcome) -> None:
        for field, gauge in self._reading_gauges.items():
            gauge.set(float(getattr(reading, field)))
        self._success.set(1 if outcome.success else 0)
        self._duration.set(outcome.duration_seconds)

    def render(self) -> bytes:
        """Serialize the scope in the Prometheus text exposition format."""
        return generate_latest(self.registry)

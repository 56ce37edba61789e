from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TasmotaReading(BaseModel):
    """Snapshot of one tasmota plug poll.

    Every field defaults to zero, so a reading built from a page that lacks a
    row is indistinguishable from a genuine zero measurement.
    """

    model_config = ConfigDict(frozen=True)

    power_state: bool = False
    voltage: float = 0.0  # V
    current: float = 0.0  # A
    active_power: float = 0.0  # W
    apparent_power: float = 0.0  # VA
    reactive_power: float = 0.0  # VAr
    power_factor: float = 0.0
    energy_today: float = 0.0  # kWh
    energy_yesterday: float = 0.0  # kWh
    energy_total: float = 0.0  # kWh, since factory reset


class ProbeOutcome(BaseModel):
    """Bookkeeping for a single probe."""

    model_config = ConfigDict(frozen=True)

    success: bool
    duration_seconds: float

"""Parser for the tasmota ``?m`` status page.

The page is not well-formed markup. It is a flat string of rows delimited by
tasmota's template tokens::

    {s}<label>{m}<value cell(s)>{e}

where the value cells wrap the number in table markup and are followed by a
unit. Parsing is a chain of plain string splits, never an HTML parser.
"""

from __future__ import annotations

import re

from loguru import logger

from tasmota_exporter.models.telemetry_models import TasmotaReading

ROW_SEPARATOR = "{s}"
LABEL_SEPARATOR = "{m}"
ROW_TERMINATOR = "{e}"

POWER_ON_MARKER = "ON"

# Removed in this order; anything else is left in place
DECORATIVE_CELLS = (
    "</td><td style='text-align:left'>",
    "</td><td>&nbsp;</td><td>",
)

# Plain ASCII decimal or inf/nan, no whitespace or digit separators
NUMBER_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

LABEL_TO_FIELD = {
    "Voltage": "voltage",
    "Current": "current",
    "Active Power": "active_power",
    "Apparent Power": "apparent_power",
    "Reactive Power": "reactive_power",
    "Power Factor": "power_factor",
    "Energy Today": "energy_today",
    "Energy Yesterday": "energy_yesterday",
    "Energy Total": "energy_total",
}


def _strip_decorations(value: str) -> str:
    for cell in DECORATIVE_CELLS:
        value = value.replace(cell, "")
    return value


def parse(raw: str) -> TasmotaReading:
    """Extract a TasmotaReading from a raw status page.

    Never raises. Rows without a label separator are ignored, rows whose value
    is not a number are skipped and unknown labels are logged and dropped.

    The power state is a plain substring check for ``ON`` anywhere in the
    page, so any other occurrence of that token (e.g. in a custom label) turns
    it on as well.
    """
    fields: dict[str, float] = {}

    for row in raw.split(ROW_SEPARATOR):
        parts = row.split(LABEL_SEPARATOR)
        if len(parts) < 2:
            continue

        label = parts[0]
        value_with_unit = _strip_decorations(parts[1].split(ROW_TERMINATOR)[0])
        token = value_with_unit.split(" ")[0]

        if NUMBER_RE.fullmatch(token) is None:
            logger.debug(f"Skipping row '{label}', value is not a number: {token!r}")
            continue
        value = float(token)

        field = LABEL_TO_FIELD.get(label)
        if field is None:
            logger.warning(f"Unable to match label, got: {label}, value: {value:f}")
            continue
        fields[field] = value

    return TasmotaReading(power_state=POWER_ON_MARKER in raw, **fields)

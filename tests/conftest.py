from __future__ import annotations

import pytest

PAGE_TEMPLATE = (
    "{{t}}</table><hr/>{{t}}{{s}}</th><th></th><th style='text-align:center'><th></th><td>{{e}}"
    "{{s}}Voltage{{m}}</td><td style='text-align:left'>{voltage}</td><td>&nbsp;</td><td> V{{e}}"
    "{{s}}Current{{m}}</td><td style='text-align:left'>{current}</td><td>&nbsp;</td><td> A{{e}}"
    "{{s}}Active Power{{m}}</td><td style='text-align:left'>{active_power}</td><td>&nbsp;</td><td> W{{e}}"
    "{{s}}Apparent Power{{m}}</td><td style='text-align:left'>{apparent_power}</td><td>&nbsp;</td><td> VA{{e}}"
    "{{s}}Reactive Power{{m}}</td><td style='text-align:left'>{reactive_power}</td><td>&nbsp;</td><td> VAr{{e}}"
    "{{s}}Power Factor{{m}}</td><td style='text-align:left'>{power_factor}</td><td>&nbsp;</td>"
    "<td>                         {{e}}"
    "{{s}}Energy Today{{m}}</td><td style='text-align:left'>{energy_today}</td><td>&nbsp;</td><td> kWh{{e}}"
    "{{s}}Energy Yesterday{{m}}</td><td style='text-align:left'>{energy_yesterday}</td><td>&nbsp;</td>"
    "<td> kWh{{e}}"
    "{{s}}Energy Total{{m}}</td><td style='text-align:left'>{energy_total}</td><td>&nbsp;</td><td> kWh{{e}}"
    "</table><hr/>{{t}}</table>{{t}}<tr><td style='width:100%;text-align:center;font-weight:{weight};"
    "font-size:62px'>{state}</td></tr><tr></tr></table>\n\n\t\t\t"
)


def make_status_page(state: str = "ON", **values: str) -> str:
    """Render a status page the way a tasmota plug serves ``/?m``."""
    fields = dict(
        voltage="0",
        current="0.000",
        active_power="0",
        apparent_power="0",
        reactive_power="0",
        power_factor="0.00",
        energy_today="0.000",
        energy_yesterday="0.000",
        energy_total="0.000",
    )
    fields.update(values)
    weight = "bold" if state == "ON" else "normal"
    return PAGE_TEMPLATE.format(state=state, weight=weight, **fields)


@pytest.fixture
def status_page():
    return make_status_page

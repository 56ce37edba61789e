import os

LISTEN_ADDR = os.getenv("TASMOTA_EXPORTER_LISTEN_ADDR") or ":9090"
LOG_LEVEL = os.getenv("TASMOTA_EXPORTER_LOG_LEVEL", "INFO").upper()

# Upper bound for a whole probe, fetch included
PROBE_TIMEOUT_SEC = 5.0

# Appended to the device url to request the machine-readable status page
DEVICE_STATUS_QUERY = "m"


def parse_listen_addr(addr: str) -> tuple[str, int]:
    """Split a ``host:port`` listen address.

    An empty host (``:9090``) binds every interface. IPv6 hosts are given
    in brackets, e.g. ``[::1]:9090``.
    """
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address: {addr!r}")
    host = host.strip("[]") or "0.0.0.0"
    return host, int(port)

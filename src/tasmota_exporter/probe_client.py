from __future__ import annotations

import asyncio

import aiohttp
from loguru import logger

from tasmota_exporter import settings


def status_url(target: str) -> str:
    return f"http://{target}?{settings.DEVICE_STATUS_QUERY}"


async def fetch_status(
    target: str,
    *,
    timeout_sec: float = settings.PROBE_TIMEOUT_SEC,
    session: aiohttp.ClientSession | None = None,
) -> tuple[bytes, bool]:
    """GET the machine-readable status page of a tasmota device.

    Returns the body bytes exactly as received and ``True``, or ``b""`` and
    ``False`` when the request fails, runs past ``timeout_sec`` or the body is
    not valid UTF-8. The device status code is not checked. Failures are
    logged and never raised; there is no retry.

    A caller-owned ``session`` is reused as is, otherwise a short-lived one is
    opened for this single request.
    """
    url = status_url(target)
    timeout = aiohttp.ClientTimeout(total=timeout_sec)

    try:
        if session is not None:
            return await _get_body(session, url, timeout), True
        async with aiohttp.ClientSession() as own_session:
            return await _get_body(own_session, url, timeout), True
    except (asyncio.TimeoutError, TimeoutError) as e:
        logger.warning(f"Timed out querying tasmota target ({target}) after {timeout_sec}s: {e!r}")
    except aiohttp.ClientError as e:
        logger.warning(f"Failed to query tasmota target ({target}): {e}")
    except UnicodeDecodeError as e:
        logger.warning(f"Failed to decode data from tasmota target ({target}): {e}")
    except ValueError as e:
        # yarl rejects targets that do not form a valid url
        logger.warning(f"Invalid tasmota target ({target}): {e}")
    return b"", False


async def _get_body(session: aiohttp.ClientSession, url: str, timeout: aiohttp.ClientTimeout) -> bytes:
    async with session.get(url, timeout=timeout) as response:
        body = await response.read()
    # Pages that are not UTF-8 raise UnicodeDecodeError here
    body.decode("utf-8")
    return body

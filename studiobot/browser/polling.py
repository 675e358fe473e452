"""Polling lookups against a lazily rendered document."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Protocol

from playwright.async_api import ElementHandle

from studiobot.errors import ElementNotFoundError

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 10
DEFAULT_ELEMENT_TIMEOUT_MS = 5000


class Region(Protocol):
    """Search scope: a Playwright ``Page``, ``Frame`` or ``ElementHandle``."""

    async def query_selector(self, selector: str) -> Optional[ElementHandle]:
        ...


async def wait_for_element(
    selector: str,
    region: Region,
    timeout_ms: int = DEFAULT_ELEMENT_TIMEOUT_MS,
    interval_ms: int = POLL_INTERVAL_MS,
) -> Optional[Any]:
    """Poll ``region`` for ``selector`` until it matches or ``timeout_ms`` elapses.

    Returns the first match as soon as it appears. On timeout a debug trace is
    emitted and ``None`` is returned; whether that matters is up to the caller.
    The interval is constant: Studio's render latency does not grow with the
    time already spent waiting.
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout_ms / 1000
    while True:
        element = await region.query_selector(selector)
        if element:
            return element
        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        await asyncio.sleep(min(interval_ms / 1000, remaining))

    logger.debug(f"Could not find {selector} inside {region!r} within {timeout_ms}ms")
    return None


async def require_element(
    selector: str,
    region: Region,
    timeout_ms: int = DEFAULT_ELEMENT_TIMEOUT_MS,
    interval_ms: int = POLL_INTERVAL_MS,
) -> Any:
    """Like :func:`wait_for_element` but raise when nothing appears."""
    element = await wait_for_element(selector, region, timeout_ms, interval_ms)
    if element is None:
        raise ElementNotFoundError(
            f"Element not found: {selector}",
            selector=selector,
            timeout_ms=timeout_ms,
            data={"region": repr(region)},
        )
    return element


async def wait_for_hidden(
    element: Any,
    timeout_ms: int = DEFAULT_ELEMENT_TIMEOUT_MS,
    interval_ms: int = POLL_INTERVAL_MS,
) -> bool:
    """Poll until ``element`` is hidden or detached from the document.

    Returns ``False`` if it is still visible when the deadline passes.
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout_ms / 1000
    while True:
        if not await element.is_visible():
            return True
        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        await asyncio.sleep(min(interval_ms / 1000, remaining))

    logger.debug(f"{element!r} still visible after {timeout_ms}ms")
    return False

"""Simulated user interaction with Studio controls."""
from __future__ import annotations

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)

# Studio's polymer controls listen for mousedown as well as click.
MOUSEDOWN_INIT = {"bubbles": True, "cancelable": False}
NATIVE_CLICK = "element => element.click()"


async def click(element: Any) -> None:
    """Press ``element`` the way a user would.

    Dispatches ``mousedown`` and then calls the element's native ``click()``
    inside the page. Nothing is awaited beyond the dispatch itself: the effect
    has to be observed by polling for whatever the click should render.
    """
    await element.dispatch_event("mousedown", MOUSEDOWN_INIT)
    await element.evaluate(NATIVE_CLICK)
    logger.debug(f"{element!r} clicked")


async def settle(ms: int) -> None:
    """Give Studio ``ms`` milliseconds to finish re-rendering."""
    if ms <= 0:
        return
    logger.debug(f"Settling for {ms}ms")
    await asyncio.sleep(ms / 1000)


async def read_text(element: Any) -> str:
    """Return the trimmed text content of ``element``."""
    if element is None:
        return ""
    text = await element.text_content()
    return (text or "").strip()

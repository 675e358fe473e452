"""Base class for the typed wrappers around Studio UI regions."""
from __future__ import annotations

from typing import Any, Optional

from studiobot.browser.polling import require_element, wait_for_element
from studiobot.config import Timings
from studiobot.errors import StepConsumedError


class Step:
    """Wraps one region of the page and exposes the operations legal there.

    ``raw`` is the region the step is scoped to and ``page`` the whole
    document, for controls Studio renders outside that region.

    A step is single use: once an advancing operation has produced the next
    wrapper (or finished the item), advancing again raises
    :class:`StepConsumedError`.
    """

    def __init__(self, raw: Any, page: Any, timings: Timings) -> None:
        self.raw = raw
        self.page = page
        self.timings = timings
        self._consumed = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw!r})"

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _advance(self) -> None:
        if self._consumed:
            raise StepConsumedError(f"{type(self).__name__} has already been advanced")
        self._consumed = True

    async def _find(self, selector: str, region: Any = None, timeout_ms: Optional[int] = None) -> Any:
        return await wait_for_element(
            selector,
            self.raw if region is None else region,
            self.timings.element_timeout_ms if timeout_ms is None else timeout_ms,
            self.timings.poll_interval_ms,
        )

    async def _require(self, selector: str, region: Any = None, timeout_ms: Optional[int] = None) -> Any:
        return await require_element(
            selector,
            self.raw if region is None else region,
            self.timings.element_timeout_ms if timeout_ms is None else timeout_ms,
            self.timings.poll_interval_ms,
        )

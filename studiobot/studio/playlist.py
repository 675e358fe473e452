"""Playlist item and context menu wrappers used to reorder a playlist."""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from studiobot.browser.actions import click, read_text
from studiobot.browser.selectors import Ordinals, PlaylistSelectors
from studiobot.config import Timings
from studiobot.errors import ElementNotFoundError, MenuEmptyError
from studiobot.studio.steps import Step

logger = logging.getLogger(__name__)


class ContextMenu(Step):
    """The ``...`` menu of a playlist item.

    Studio only offers jumps to the top or bottom plus single-step moves;
    the entries are picked by position.
    """

    async def any_menu_item(self) -> Any:
        item = await self._find(PlaylistSelectors.MENU_ITEM)
        if not item:
            raise MenuEmptyError(
                "Could not locate any menu item",
                selector=PlaylistSelectors.MENU_ITEM,
                timeout_ms=self.timings.element_timeout_ms,
            )
        return item

    async def menu_items(self) -> List[Any]:
        return await self.raw.query_selector_all(PlaylistSelectors.MENU_ITEM)

    async def _click_entry(self, index: int, label: str) -> None:
        self._advance()
        items = await self.menu_items()
        if index >= len(items):
            raise ElementNotFoundError(
                f"Menu entry '{label}' missing: {len(items)} entries rendered",
                selector=PlaylistSelectors.MENU_ITEM,
                data={"index": index, "available": len(items)},
            )
        await click(items[index])
        logger.debug(f"{label} selected")

    async def move_to_top(self) -> None:
        await self._click_entry(Ordinals.MOVE_TO_TOP, "Move to top")

    async def move_to_bottom(self) -> None:
        await self._click_entry(Ordinals.MOVE_TO_BOTTOM, "Move to bottom")


class PlaylistVideo(Step):
    """One entry of a playlist."""

    async def name(self) -> str:
        """Title text as rendered right now; not polled."""
        return await read_text(await self.raw.query_selector(PlaylistSelectors.VIDEO_TITLE))

    async def menu_button(self) -> Optional[Any]:
        return await self._find(PlaylistSelectors.MENU_BUTTON, timeout_ms=self.timings.probe_timeout_ms)

    async def open_menu(self) -> ContextMenu:
        """Open the item's context menu once it has at least one entry."""
        self._advance()
        button = await self.menu_button()
        if button is None:
            raise ElementNotFoundError(
                f"Menu button not found: {PlaylistSelectors.MENU_BUTTON}",
                selector=PlaylistSelectors.MENU_BUTTON,
                timeout_ms=self.timings.probe_timeout_ms,
            )
        await click(button)
        menu = ContextMenu(await self._require(PlaylistSelectors.ITEM_MENU, self.page), self.page, self.timings)
        await menu.any_menu_item()
        return menu


async def playlist_videos(page: Any, timings: Timings) -> List[PlaylistVideo]:
    """Wrap every item currently rendered in the playlist."""
    items = await page.query_selector_all(PlaylistSelectors.PLAYLIST_VIDEO)
    return [PlaylistVideo(item, page, timings) for item in items]

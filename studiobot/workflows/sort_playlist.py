"""Reorder a playlist by name using Studio's "Move to bottom" action."""
from __future__ import annotations

import logging
import time
from functools import cmp_to_key
from typing import Any, List, Optional, Tuple

from studiobot.browser.actions import settle
from studiobot.config import BotConfig, Mode, SortCompare
from studiobot.studio.playlist import PlaylistVideo, playlist_videos
from studiobot.workflows.report import RunReport

logger = logging.getLogger(__name__)


def sorted_by_name(
    named: List[Tuple[str, PlaylistVideo]], compare: SortCompare
) -> List[Tuple[str, PlaylistVideo]]:
    """Stable sort of ``(name, video)`` pairs with ``compare`` on the names."""
    key = cmp_to_key(compare)
    return sorted(named, key=lambda pair: key(pair[0]))


async def sort_playlist(page: Any, config: BotConfig, report: Optional[RunReport] = None) -> RunReport:
    """Sort the playlist on ``page`` with ``config.sort_compare``.

    Sorting only fixes the order in which items are visited. Each visited
    item is then moved to the bottom of the playlist; since every earlier
    item was moved down before it, the playlist ends up in sorted order
    once the last item has been moved. Nothing else may reorder the
    playlist while this runs.
    """
    timings = config.timings
    if report is None:
        report = RunReport(mode=Mode.SORT_PLAYLIST)
    started = time.monotonic()

    logger.info("Sorting playlist")
    videos = await playlist_videos(page, timings)
    report.found = report.eligible = len(videos)
    logger.info(f"Found {len(videos)} videos")

    named = [(await video.name(), video) for video in videos]
    ordered = sorted_by_name(named, config.sort_compare)
    try:
        for index, (name, video) in enumerate(ordered):
            logger.debug(f"Moving {index}: {name!r} to bottom")
            menu = await video.open_menu()
            await menu.move_to_bottom()
            report.processed.append(name)
            await settle(timings.move_pause_ms)
    finally:
        report.elapsed_seconds = time.monotonic() - started

    logger.info(f"Moved {len(report.processed)} videos")
    return report

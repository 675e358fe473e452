"""Publish every draft on the Studio content page."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, List, Optional

from studiobot.browser.actions import settle
from studiobot.config import BotConfig, Mode, Timings
from studiobot.studio.publish import VideoRow, all_videos
from studiobot.workflows.report import RunReport

logger = logging.getLogger(__name__)


async def editable_videos(rows: List[VideoRow]) -> List[VideoRow]:
    """Keep the rows that show an edit-draft button, in listing order.

    All rows are probed at once so classification costs one probe timeout,
    not one per row.
    """
    buttons = await asyncio.gather(*(row.edit_draft_button() for row in rows))
    return [row for row, button in zip(rows, buttons) if button is not None]


async def publish_video(row: VideoRow, config: BotConfig) -> None:
    """Walk one draft through the whole upload wizard."""
    draft = await row.open_draft()
    rating = await draft.set_audience(config.made_for_kids)
    visibility = await rating.go_to_visibility()
    await visibility.set_visibility(config.visibility)
    dialog = await visibility.save()
    await dialog.close()


async def publish_drafts(page: Any, config: BotConfig, report: Optional[RunReport] = None) -> RunReport:
    """Publish every draft listed on ``page`` with the configured settings.

    Drafts are handled strictly one after another: Studio has a single
    upload wizard, so the next draft is only opened once the previous
    share dialog has been closed. Pass ``report`` to keep the partial tally
    when a step fails.
    """
    timings: Timings = config.timings
    if report is None:
        report = RunReport(mode=Mode.PUBLISH_DRAFTS)
    started = time.monotonic()

    rows = await all_videos(page, timings)
    report.found = len(rows)
    videos = await editable_videos(rows)
    report.eligible = len(videos)
    logger.info(f"Found {len(videos)} drafts out of {len(rows)} videos")

    await settle(timings.classify_pause_ms)
    try:
        for index, video in enumerate(videos, start=1):
            logger.info(f"Publishing draft {index}/{len(videos)} as {config.visibility.label}")
            await publish_video(video, config)
            report.processed.append(f"draft #{index}")
            await settle(timings.settle_ms)
    finally:
        report.elapsed_seconds = time.monotonic() - started

    logger.info(f"Published {len(report.processed)} drafts")
    return report

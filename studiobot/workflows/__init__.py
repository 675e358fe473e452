"""Workflow drivers and the dispatcher that picks one per run."""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from studiobot.config import BotConfig, Mode
from studiobot.workflows.publish_drafts import publish_drafts
from studiobot.workflows.report import RunReport
from studiobot.workflows.sort_playlist import sort_playlist

logger = logging.getLogger(__name__)

Operation = Callable[[Any, BotConfig, Optional[RunReport]], Awaitable[RunReport]]

OPERATIONS: Dict[Mode, Operation] = {
    Mode.PUBLISH_DRAFTS: publish_drafts,
    Mode.SORT_PLAYLIST: sort_playlist,
}


async def run(page: Any, config: BotConfig, report: Optional[RunReport] = None) -> RunReport:
    """Run the workflow selected by ``config.mode`` once against ``page``."""
    try:
        operation = OPERATIONS[config.mode]
    except KeyError:
        raise ValueError(f"Unsupported mode: {config.mode!r}") from None
    if report is None:
        report = RunReport(mode=config.mode)
    logger.debug(f"Running {config.mode.value}")
    return await operation(page, config, report)


__all__ = [
    "OPERATIONS",
    "RunReport",
    "publish_drafts",
    "run",
    "sort_playlist",
]

"""Bulk YouTube Studio chores driven through the Studio web UI."""

from .config import BotConfig, Mode, Settings, Timings, Visibility, get_settings, natural_compare
from .errors import ElementNotFoundError, MenuEmptyError, StepConsumedError
from .workflows import RunReport, publish_drafts, run, sort_playlist

__all__ = [
    "BotConfig",
    "Mode",
    "Settings",
    "Timings",
    "Visibility",
    "get_settings",
    "natural_compare",
    "ElementNotFoundError",
    "MenuEmptyError",
    "StepConsumedError",
    # Workflows
    "RunReport",
    "publish_drafts",
    "run",
    "sort_playlist",
]

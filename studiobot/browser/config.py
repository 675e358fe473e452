"""Centralized browser launch configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

STUDIO_URL = "https://studio.youtube.com/"
PLAYLIST_URL = "https://www.youtube.com/playlist"

# Tabs the workflows can run on: the Studio drafts list and playlist pages.
WORK_URLS = (STUDIO_URL, PLAYLIST_URL)

# Studio's content table collapses columns below this width.
DEFAULT_VIEWPORT = {"width": 1920, "height": 1080}


@dataclass(frozen=True)
class ChromeArgs:
    """Immutable container for Chrome launch arguments."""

    BASE_ARGS: tuple[str, ...] = (
        '--no-first-run',
        '--no-default-browser-check',
        '--window-size=1920,1080',
    )

    # Studio keeps polling in background tabs; throttling slows every wait.
    BACKGROUND_ARGS: tuple[str, ...] = (
        '--disable-background-timer-throttling',
        '--disable-backgrounding-occluded-windows',
        '--disable-renderer-backgrounding',
    )

    # Google sign-in refuses browsers that advertise automation.
    SIGN_IN_ARGS: tuple[str, ...] = (
        '--disable-blink-features=AutomationControlled',
    )

    HEADLESS_ARG: str = '--headless=new'

    def build_args(
        self,
        *,
        headless: bool = False,
        extra_args: Optional[List[str]] = None
    ) -> List[str]:
        """Build Chrome arguments list based on configuration."""
        args = list(self.BASE_ARGS) + list(self.BACKGROUND_ARGS) + list(self.SIGN_IN_ARGS)

        if headless:
            args.append(self.HEADLESS_ARG)

        if extra_args:
            args.extend(extra_args)

        return args


_chrome_args = ChromeArgs()


def get_chrome_args(
    *,
    headless: bool = False,
    extra_args: Optional[List[str]] = None
) -> List[str]:
    """Get Chrome launch arguments.

    Example:
        >>> args = get_chrome_args(headless=True)
        >>> args[-1]
        '--headless=new'
    """
    return _chrome_args.build_args(headless=headless, extra_args=extra_args)

"""Playwright session that hosts the Studio page the bot drives."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from .config import DEFAULT_VIEWPORT, STUDIO_URL, WORK_URLS, get_chrome_args

logger = logging.getLogger(__name__)


@dataclass
class BrowserConfig:
    """Configuration for the browser that shows Studio."""

    headless: bool = False
    viewport: Optional[Dict[str, int]] = None
    locale: Optional[str] = None
    slow_mo: int = 0  # Slow down operations by this many milliseconds
    timeout: int = 30000  # Default navigation timeout in milliseconds

    # Persistent profile so a Google sign-in survives between runs
    user_data_dir: Optional[str] = None
    # Attach to an already running Chrome (started with --remote-debugging-port)
    cdp_url: Optional[str] = None
    extra_args: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.viewport is None:
            self.viewport = DEFAULT_VIEWPORT.copy()


@dataclass
class BrowserSession:
    """Represents an active browser session."""

    browser: Optional[Browser]
    context: BrowserContext
    page: Page
    config: BrowserConfig

    @property
    def attached(self) -> bool:
        return self.config.cdp_url is not None

    async def close(self):
        """Close the browser session.

        A browser reached over CDP belongs to the user: only the connection
        is dropped, its tabs are left open.
        """
        try:
            if self.attached:
                if self.browser is not None:
                    await self.browser.close()
                return
            await self.context.close()
            if self.browser is not None:
                await self.browser.close()
        except Exception as e:
            logger.error(f"Error closing browser session: {e}")


class BrowserAutomation:
    """Starts Playwright and hands out the page the workflows run on."""

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()
        self._playwright = None
        self._sessions: List[BrowserSession] = []

    async def __aenter__(self):
        """Async context manager entry."""
        self._playwright = await async_playwright().start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close_all_sessions()
        if self._playwright:
            await self._playwright.stop()

    async def create_session(self, config: Optional[BrowserConfig] = None) -> BrowserSession:
        """Attach to or launch a Chromium and return a session with one page."""
        if not self._playwright:
            raise RuntimeError("BrowserAutomation not started. Use async context manager.")

        session_config = config or self.config
        chromium = self._playwright.chromium

        if session_config.cdp_url:
            logger.info(f"Attaching to running browser at {session_config.cdp_url}")
            browser = await chromium.connect_over_cdp(session_config.cdp_url)
            context = browser.contexts[0] if browser.contexts else await browser.new_context()
            page = _studio_tab(context.pages) or await context.new_page()
            session = BrowserSession(browser=browser, context=context, page=page, config=session_config)

        elif session_config.user_data_dir:
            logger.info(f"Using persistent profile at: {session_config.user_data_dir}")
            context = await chromium.launch_persistent_context(
                user_data_dir=session_config.user_data_dir,
                headless=session_config.headless,
                slow_mo=session_config.slow_mo,
                args=get_chrome_args(headless=session_config.headless, extra_args=session_config.extra_args),
                viewport=session_config.viewport,
                locale=session_config.locale or "en-US",
            )
            pages = context.pages
            page = pages[0] if pages else await context.new_page()
            session = BrowserSession(browser=None, context=context, page=page, config=session_config)

        else:
            browser = await chromium.launch(
                headless=session_config.headless,
                slow_mo=session_config.slow_mo,
                args=get_chrome_args(headless=session_config.headless, extra_args=session_config.extra_args),
            )
            context_options: Dict[str, Any] = {"viewport": session_config.viewport}
            if session_config.locale:
                context_options["locale"] = session_config.locale
            context = await browser.new_context(**context_options)
            page = await context.new_page()
            session = BrowserSession(browser=browser, context=context, page=page, config=session_config)

        session.context.set_default_timeout(session_config.timeout)
        self._sessions.append(session)
        logger.info(
            f"Created browser session (attached={session.attached}, "
            f"persistent={session_config.user_data_dir is not None})"
        )
        return session

    async def open_page(self, url: Optional[str] = None, config: Optional[BrowserConfig] = None) -> Page:
        """Return a page showing ``url``, navigating only when needed."""
        session = await self.create_session(config)
        page = session.page
        if url is None and session.attached:
            # The user prepared this tab; drive it where it is.
            return page
        target = url or STUDIO_URL
        if page.url.rstrip("/") != target.rstrip("/"):
            logger.info(f"Navigating to: {target}")
            await page.goto(target, wait_until="domcontentloaded")
        return page

    async def close_session(self, session: BrowserSession):
        """Close a specific browser session."""
        await session.close()
        if session in self._sessions:
            self._sessions.remove(session)

    async def close_all_sessions(self):
        """Close all active browser sessions."""
        for session in self._sessions.copy():
            await self.close_session(session)


def _studio_tab(pages: List[Page]) -> Optional[Page]:
    """Pick an already open Studio or playlist tab, if the user has one."""
    for page in pages:
        if page.url.startswith(WORK_URLS):
            return page
    return None

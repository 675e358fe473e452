"""Playwright plumbing: session, polling and simulated clicks."""

from .actions import click, read_text, settle
from .automation import BrowserAutomation, BrowserConfig, BrowserSession
from .config import DEFAULT_VIEWPORT, STUDIO_URL, get_chrome_args
from .polling import require_element, wait_for_element, wait_for_hidden
from .selectors import Ordinals, PlaylistSelectors, PublishSelectors

__all__ = [
    "BrowserAutomation",
    "BrowserConfig",
    "BrowserSession",
    "DEFAULT_VIEWPORT",
    "STUDIO_URL",
    "get_chrome_args",
    # Element discovery and interaction
    "click",
    "read_text",
    "settle",
    "require_element",
    "wait_for_element",
    "wait_for_hidden",
    # Studio layout
    "Ordinals",
    "PlaylistSelectors",
    "PublishSelectors",
]

"""Selectors and positional indexes for the current YouTube Studio layout.

Studio exposes no semantic hooks for most of these controls, so several
actions pick a child by position. All such ordinals live in :class:`Ordinals`
so a layout change has one place to be fixed.
"""
from __future__ import annotations

from typing import Dict

from studiobot.config import Visibility


class PublishSelectors:
    """Draft list and upload wizard."""

    VIDEO_ROW = "ytcp-video-row"
    DRAFT_MODAL = ".style-scope.ytcp-uploads-dialog"
    DRAFT_BUTTON = ".edit-draft-button"
    RADIO_BUTTON = "tp-yt-paper-radio-button"
    VISIBILITY_STEPPER = "#step-badge-3"
    VISIBILITY_PAPER_BUTTONS = "tp-yt-paper-radio-group"
    SAVE_BUTTON = "#done-button"
    SUCCESS_ELEMENT = "ytcp-video-thumbnail-with-info"
    DIALOG = "ytcp-dialog.ytcp-video-share-dialog > tp-yt-paper-dialog:nth-child(1)"
    DIALOG_CLOSE_BUTTON = "tp-yt-iron-icon"


class PlaylistSelectors:
    """Playlist page and per-item context menu."""

    PLAYLIST_VIDEO = "ytd-playlist-video-renderer"
    VIDEO_TITLE = "#video-title"
    MENU_BUTTON = "button"
    ITEM_MENU = "tp-yt-paper-listbox#items"
    MENU_ITEM = "ytd-menu-service-item-renderer"


class Ordinals:
    """Positional indexes into Studio's radio groups and menus."""

    # nth-child is 1-based.
    MADE_FOR_KIDS_YES = 1
    MADE_FOR_KIDS_NO = 2

    VISIBILITY: Dict[Visibility, int] = {
        Visibility.PRIVATE: 0,
        Visibility.UNLISTED: 1,
        Visibility.PUBLIC: 2,
    }

    MOVE_TO_TOP = 4
    MOVE_TO_BOTTOM = 5


def made_for_kids_radio(made_for_kids: bool) -> str:
    """Selector for the audience radio matching ``made_for_kids``."""
    nth_child = Ordinals.MADE_FOR_KIDS_YES if made_for_kids else Ordinals.MADE_FOR_KIDS_NO
    return f"{PublishSelectors.RADIO_BUTTON}:nth-child({nth_child})"

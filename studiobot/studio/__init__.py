"""Typed wrappers over the Studio pages the workflows walk through."""

from .playlist import ContextMenu, PlaylistVideo, playlist_videos
from .publish import (
    ConfirmationDialog,
    DraftEditor,
    RatingStep,
    VideoRow,
    VisibilityStep,
    all_videos,
)
from .steps import Step

__all__ = [
    "Step",
    # Upload wizard
    "VideoRow",
    "DraftEditor",
    "RatingStep",
    "VisibilityStep",
    "ConfirmationDialog",
    "all_videos",
    # Playlist menu
    "PlaylistVideo",
    "ContextMenu",
    "playlist_videos",
]

"""Upload wizard wrappers used to publish a draft.

One draft goes through the wizard in a fixed order::

    VideoRow.open_draft()              -> DraftEditor
    DraftEditor.set_audience(...)      -> RatingStep
    RatingStep.go_to_visibility()      -> VisibilityStep
    VisibilityStep.set_visibility(...)
    VisibilityStep.save()              -> ConfirmationDialog
    ConfirmationDialog.close()

The editor, rating and visibility wrappers share the same dialog root; only
the active panel inside it changes.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from studiobot.browser.actions import click, settle
from studiobot.browser.polling import wait_for_hidden
from studiobot.browser.selectors import Ordinals, PublishSelectors, made_for_kids_radio
from studiobot.config import Timings, Visibility
from studiobot.errors import ElementNotFoundError
from studiobot.studio.steps import Step

logger = logging.getLogger(__name__)


class ConfirmationDialog(Step):
    """Share dialog shown once a draft has been saved."""

    async def close_dialog_button(self) -> Any:
        return await self._require(PublishSelectors.DIALOG_CLOSE_BUTTON)

    async def close(self) -> None:
        """Close the dialog. This finishes the draft."""
        self._advance()
        await click(await self.close_dialog_button())
        closed = await wait_for_hidden(
            self.raw,
            self.timings.element_timeout_ms,
            self.timings.poll_interval_ms,
        )
        if not closed:
            logger.warning("Share dialog still visible after closing it")
        await settle(self.timings.settle_ms)
        logger.debug("Dialog closed")


class VisibilityStep(Step):
    """Visibility panel of the upload wizard."""

    async def visibility_radio_button(self, level: Visibility) -> Any:
        group = await self._require(PublishSelectors.VISIBILITY_PAPER_BUTTONS)
        buttons = await group.query_selector_all(PublishSelectors.RADIO_BUTTON)
        index = Ordinals.VISIBILITY[level]
        if index >= len(buttons):
            raise ElementNotFoundError(
                f"Visibility option {level.label} not rendered ({len(buttons)} options found)",
                selector=PublishSelectors.RADIO_BUTTON,
                data={"index": index, "available": len(buttons)},
            )
        return buttons[index]

    async def set_visibility(self, level: Visibility) -> None:
        await click(await self.visibility_radio_button(level))
        logger.debug(f"Visibility set to {level.label}")
        await settle(self.timings.settle_ms)

    async def save_button(self) -> Any:
        return await self._require(PublishSelectors.SAVE_BUTTON)

    async def is_saved(self) -> Any:
        # Studio gives no explicit rejection signal; a failed save shows up
        # as this marker never appearing.
        return await self._require(PublishSelectors.SUCCESS_ELEMENT, self.page)

    async def dialog(self) -> Any:
        return await self._require(PublishSelectors.DIALOG, self.page)

    async def save(self) -> ConfirmationDialog:
        """Save the draft and wait for Studio to confirm it."""
        self._advance()
        await click(await self.save_button())
        await self.is_saved()
        logger.debug("Changes saved")
        return ConfirmationDialog(await self.dialog(), self.page, self.timings)


class RatingStep(Step):
    """Details panel once the audience question has been answered."""

    async def visibility_stepper(self) -> Any:
        return await self._require(PublishSelectors.VISIBILITY_STEPPER)

    async def go_to_visibility(self) -> VisibilityStep:
        self._advance()
        logger.debug("Navigating to Visibility step")
        await click(await self.visibility_stepper())
        await settle(self.timings.settle_ms)
        return VisibilityStep(self.raw, self.page, self.timings)


class DraftEditor(Step):
    """Upload wizard opened on a draft."""

    async def made_for_kids_paper_button(self, made_for_kids: bool) -> Any:
        return await self._require(made_for_kids_radio(made_for_kids))

    async def set_audience(self, made_for_kids: bool) -> RatingStep:
        self._advance()
        await click(await self.made_for_kids_paper_button(made_for_kids))
        await settle(self.timings.settle_ms)
        logger.debug(f'"Made for kids" set as {made_for_kids}')
        return RatingStep(self.raw, self.page, self.timings)


class VideoRow(Step):
    """One row of the Studio content list."""

    async def edit_draft_button(self) -> Optional[Any]:
        """Short probe for the row's edit-draft button.

        Rows that are not drafts never render one, so ``None`` here means the
        row is not eligible.
        """
        return await self._find(PublishSelectors.DRAFT_BUTTON, timeout_ms=self.timings.probe_timeout_ms)

    async def open_draft(self) -> DraftEditor:
        self._advance()
        logger.debug("Opening draft")
        button = await self.edit_draft_button()
        if button is None:
            raise ElementNotFoundError(
                f"Edit draft button not found: {PublishSelectors.DRAFT_BUTTON}",
                selector=PublishSelectors.DRAFT_BUTTON,
                timeout_ms=self.timings.probe_timeout_ms,
            )
        await click(button)
        modal = await self._require(PublishSelectors.DRAFT_MODAL, self.page)
        return DraftEditor(modal, self.page, self.timings)


async def all_videos(page: Any, timings: Timings) -> list[VideoRow]:
    """Wrap every row currently listed on the content page."""
    rows = await page.query_selector_all(PublishSelectors.VIDEO_ROW)
    return [VideoRow(row, page, timings) for row in rows]

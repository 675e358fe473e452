"""In-memory stand-ins for the Studio pages the workflows drive.

Only the slice of Playwright's ``Page``/``ElementHandle`` API the bot uses is
implemented: scoped ``query_selector``/``query_selector_all`` keyed by exact
selector strings, ``dispatch_event``, ``evaluate`` (treated as the native
click), ``text_content`` and ``is_visible``.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional

from studiobot.browser.selectors import PlaylistSelectors, PublishSelectors, made_for_kids_radio

Lookup = Callable[[], List["FakeElement"]]


class FakeElement:
    """Element double whose children are resolved by selector at query time."""

    def __init__(
        self,
        name: str,
        *,
        text: Optional[str] = None,
        on_click: Optional[Callable[[], None]] = None,
    ) -> None:
        self.name = name
        self.text = text
        self.on_click = on_click
        self.visible = True
        self.events: List[tuple] = []
        self._lookups: Dict[str, Lookup] = {}

    def __repr__(self) -> str:
        return f"<{self.name}>"

    def provide(self, selector: str, lookup: Lookup) -> None:
        self._lookups[selector] = lookup

    def attach(self, selector: str, *elements: "FakeElement") -> None:
        self._lookups[selector] = lambda: list(elements)

    async def query_selector(self, selector: str) -> Optional["FakeElement"]:
        matches = await self.query_selector_all(selector)
        return matches[0] if matches else None

    async def query_selector_all(self, selector: str) -> List["FakeElement"]:
        lookup = self._lookups.get(selector)
        return list(lookup()) if lookup else []

    async def dispatch_event(self, type: str, event_init: Optional[dict] = None) -> None:
        self.events.append((type, dict(event_init or {})))

    async def evaluate(self, expression: str, arg: Any = None) -> None:
        self.events.append(("click", {}))
        if self.on_click is not None:
            self.on_click()

    async def text_content(self) -> Optional[str]:
        return self.text

    async def is_visible(self) -> bool:
        return self.visible

    @property
    def clicks(self) -> int:
        return sum(1 for event, _ in self.events if event == "click")


class FakeStudio:
    """Content page with draft rows and a single shared upload wizard.

    ``drafts`` holds one flag per row: ``True`` rows render an edit-draft
    button. Saving a row listed in ``rejected`` never shows the success
    marker, the way Studio behaves when it refuses a save. Every published draft is recorded in ``published`` as
    ``(row_index, made_for_kids, visibility_index)``.
    """

    def __init__(self, drafts: List[bool], *, rejected: Iterable[int] = ()) -> None:
        self.page = FakeElement("studio-page")
        self.rejected = set(rejected)
        self.open_wizards = 0
        self.max_open_wizards = 0
        self.opened: List[int] = []
        self.published: List[tuple] = []
        self.log: List[str] = []

        self.current: Optional[int] = None
        self.made_for_kids: Optional[bool] = None
        self.visibility_index: Optional[int] = None
        self.on_visibility_panel = False
        self.saved = False
        self.is_draft = list(drafts)

        self.rows = [self._build_row(index) for index in range(len(drafts))]
        self.modal = self._build_modal()
        self.dialog = self._build_dialog()
        self.thumbnail = FakeElement("thumbnail-with-info")

        self.page.attach(PublishSelectors.VIDEO_ROW, *self.rows)
        self.page.provide(PublishSelectors.DRAFT_MODAL, lambda: [self.modal] if self.current is not None else [])
        self.page.provide(PublishSelectors.SUCCESS_ELEMENT, lambda: [self.thumbnail] if self.saved else [])
        self.page.provide(PublishSelectors.DIALOG, lambda: [self.dialog] if self.dialog.visible else [])

    def _build_row(self, index: int) -> FakeElement:
        row = FakeElement(f"video-row-{index}")
        button = FakeElement(f"edit-draft-{index}", on_click=lambda: self._open(index))
        row.provide(PublishSelectors.DRAFT_BUTTON, lambda: [button] if self.is_draft[index] else [])
        return row

    def _build_modal(self) -> FakeElement:
        modal = FakeElement("uploads-dialog")
        yes = FakeElement("made-for-kids-yes", on_click=lambda: self._set_audience(True))
        no = FakeElement("made-for-kids-no", on_click=lambda: self._set_audience(False))
        modal.attach(made_for_kids_radio(True), yes)
        modal.attach(made_for_kids_radio(False), no)

        stepper = FakeElement("step-badge-3", on_click=self._show_visibility)
        modal.attach(PublishSelectors.VISIBILITY_STEPPER, stepper)

        group = FakeElement("visibility-group")
        radios = [
            FakeElement(f"visibility-{index}", on_click=lambda index=index: self._set_visibility(index))
            for index in range(3)
        ]
        group.attach(PublishSelectors.RADIO_BUTTON, *radios)
        modal.provide(PublishSelectors.VISIBILITY_PAPER_BUTTONS, lambda: [group] if self.on_visibility_panel else [])

        done = FakeElement("done-button", on_click=self._save)
        modal.attach(PublishSelectors.SAVE_BUTTON, done)
        return modal

    def _build_dialog(self) -> FakeElement:
        dialog = FakeElement("share-dialog")
        dialog.visible = False
        close = FakeElement("close-icon", on_click=self._close)
        dialog.attach(PublishSelectors.DIALOG_CLOSE_BUTTON, close)
        return dialog

    def _open(self, index: int) -> None:
        self.log.append(f"open:{index}")
        self.open_wizards += 1
        self.max_open_wizards = max(self.max_open_wizards, self.open_wizards)
        self.opened.append(index)
        self.current = index
        self.made_for_kids = None
        self.visibility_index = None
        self.on_visibility_panel = False

    def _set_audience(self, made_for_kids: bool) -> None:
        self.made_for_kids = made_for_kids

    def _show_visibility(self) -> None:
        self.on_visibility_panel = True

    def _set_visibility(self, index: int) -> None:
        self.visibility_index = index

    def _save(self) -> None:
        if self.current in self.rejected:
            return
        self.saved = True
        self.dialog.visible = True

    def _close(self) -> None:
        assert self.current is not None
        self.log.append(f"close:{self.current}")
        self.published.append((self.current, self.made_for_kids, self.visibility_index))
        self.is_draft[self.current] = False
        self.open_wizards -= 1
        self.current = None
        self.saved = False
        self.dialog.visible = False


class FakePlaylist:
    """Playlist page whose items really move when "Move to top/bottom" is clicked.

    ``order`` is the externally visible order of item names; ``log`` records
    ``("open", name)``, ``("top", name)`` and ``("bottom", name)`` in the
    order they happen.
    """

    def __init__(self, names: List[str], *, menu_entries: int = 6) -> None:
        self.page = FakeElement("playlist-page")
        self.menu_entries = menu_entries
        self.items = [self._build_item(name) for name in names]
        self.order: List[str] = list(names)
        self.menu_for: Optional[str] = None
        self.log: List[tuple] = []

        self.menu = FakeElement("item-menu")
        self.entries = [
            FakeElement(f"menu-entry-{index}", on_click=lambda index=index: self._select(index))
            for index in range(menu_entries)
        ]
        self.menu.provide(PlaylistSelectors.MENU_ITEM, lambda: list(self.entries))

        self.page.provide(PlaylistSelectors.PLAYLIST_VIDEO, self._rendered_items)
        self.page.provide(PlaylistSelectors.ITEM_MENU, lambda: [self.menu] if self.menu_for is not None else [])

    def _build_item(self, name: str) -> FakeElement:
        item = FakeElement(f"playlist-video-{name}")
        item.attach(PlaylistSelectors.VIDEO_TITLE, FakeElement(f"title-{name}", text=f"  {name}\n"))
        item.attach(PlaylistSelectors.MENU_BUTTON, FakeElement(f"menu-button-{name}", on_click=lambda: self._open(name)))
        return item

    def _rendered_items(self) -> List[FakeElement]:
        by_name = {item.name: item for item in self.items}
        return [by_name[f"playlist-video-{name}"] for name in self.order]

    def _open(self, name: str) -> None:
        self.log.append(("open", name))
        self.menu_for = name

    def _select(self, index: int) -> None:
        name = self.menu_for
        assert name is not None
        if index not in (4, 5):
            raise AssertionError(f"unexpected menu entry {index}")
        self.order.remove(name)
        if index == 5:
            self.order.append(name)
            self.log.append(("bottom", name))
        else:
            self.order.insert(0, name)
            self.log.append(("top", name))
        self.menu_for = None

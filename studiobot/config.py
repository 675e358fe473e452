"""Run configuration for the Studio bot."""
from __future__ import annotations

import enum
import os
import re
import unicodedata
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Callable, Optional

SortCompare = Callable[[str, str], int]


class Mode(str, enum.Enum):
    """Workflow selected for a run."""

    PUBLISH_DRAFTS = "publish_drafts"
    SORT_PLAYLIST = "sort_playlist"

    @classmethod
    def parse(cls, value: "str | Mode") -> "Mode":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise ValueError(f"Unsupported mode: {value!r}")


class Visibility(enum.IntEnum):
    """Publish visibility, ordered from most to least restricted."""

    PRIVATE = 0
    UNLISTED = 1
    PUBLIC = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: "str | Visibility") -> "Visibility":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unsupported visibility: {value!r}") from None


_DIGITS = re.compile(r"(\d+)")

# Collation classes, lowest first, as ICU's root order ranks them.
_SPACE, _PUNCT, _SYMBOL, _CURRENCY, _DIGIT, _LETTER = range(6)

# ICU root order of the ASCII characters inside each class.
_ASCII_ORDER = {
    _PUNCT: "_-,;:!?.'\"()[]{}@*/\\&#%",
    _SYMBOL: "`^+<=>|~",
    _CURRENCY: "$",
}


def _fold(text: str) -> str:
    # Base sensitivity: ignore case and accents.
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _char_class(ch: str) -> int:
    category = unicodedata.category(ch)
    if ch.isspace() or category.startswith(("Z", "C")):
        return _SPACE
    if category.startswith("P"):
        return _PUNCT
    if category == "Sc":
        return _CURRENCY
    if category.startswith("S"):
        return _SYMBOL
    return _LETTER


def _char_weight(ch: str) -> tuple:
    kind = _char_class(ch)
    if kind == _LETTER:
        return (kind, 0, ch)
    table = _ASCII_ORDER.get(kind, "")
    rank = table.index(ch) if ch in table else len(table) + ord(ch)
    return (kind, rank, "")


def natural_key(name: str) -> tuple:
    """Sort key comparing digit runs numerically and letters case-insensitively.

    Characters rank whitespace < punctuation < symbols < digits < letters,
    so ``"[4K] Intro"`` sorts before ``"#1 Song"`` before ``"1 Song"``.
    """
    parts = []
    for chunk in _DIGITS.split(_fold(name.strip())):
        if not chunk:
            continue
        if chunk.isdecimal():
            parts.append((_DIGIT, int(chunk), ""))
        else:
            parts.extend(_char_weight(ch) for ch in chunk)
    return tuple(parts)


def natural_compare(one: str, other: str) -> int:
    """Numeric-aware, case-insensitive comparison of two item names."""
    left, right = natural_key(one), natural_key(other)
    return (left > right) - (left < right)


def reverse_compare(compare: SortCompare) -> SortCompare:
    """Return the descending variant of ``compare``."""

    def _reversed(one: str, other: str) -> int:
        return compare(other, one)

    return _reversed


SORT_ORDERS = {
    "asc": natural_compare,
    "desc": reverse_compare(natural_compare),
}


@dataclass(frozen=True)
class Timings:
    """Every fixed wait used against the Studio UI, in milliseconds.

    The settle and pause values are empirical debounces for Studio's own
    re-rendering. Raise them when the UI is slow rather than editing the
    workflow code.
    """

    poll_interval_ms: int = 10
    element_timeout_ms: int = 5000
    probe_timeout_ms: int = 20
    settle_ms: int = 50
    classify_pause_ms: int = 1000
    move_pause_ms: int = 500


@dataclass(frozen=True)
class BotConfig:
    """Immutable configuration threaded into the dispatcher and drivers."""

    mode: Mode = Mode.PUBLISH_DRAFTS
    debug: bool = True
    made_for_kids: bool = False
    visibility: Visibility = Visibility.UNLISTED
    sort_compare: SortCompare = natural_compare
    timings: Timings = field(default_factory=Timings)

    def with_overrides(self, **changes) -> "BotConfig":
        """Return a copy with the non-``None`` values in ``changes`` applied."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


@dataclass
class Settings:
    """Container for environment-driven settings."""

    mode: str = field(default_factory=lambda: os.getenv("STUDIOBOT_MODE", Mode.PUBLISH_DRAFTS.value))
    debug: bool = field(default_factory=lambda: _env_flag("STUDIOBOT_DEBUG", default=True))
    made_for_kids: bool = field(default_factory=lambda: _env_flag("STUDIOBOT_MADE_FOR_KIDS", default=False))
    visibility: str = field(default_factory=lambda: os.getenv("STUDIOBOT_VISIBILITY", "Unlisted"))
    sort_order: str = field(default_factory=lambda: os.getenv("STUDIOBOT_SORT_ORDER", "asc"))
    url: Optional[str] = field(default_factory=lambda: os.getenv("STUDIOBOT_URL"))
    profile_dir: Optional[str] = field(default_factory=lambda: os.getenv("STUDIOBOT_PROFILE_DIR"))
    cdp_url: Optional[str] = field(default_factory=lambda: os.getenv("STUDIOBOT_CDP_URL"))
    headless: bool = field(default_factory=lambda: _env_flag("STUDIOBOT_HEADLESS", default=False))
    slow_mo: int = field(default_factory=lambda: _env_int("STUDIOBOT_SLOW_MO", 0))
    locale: Optional[str] = field(default_factory=lambda: os.getenv("STUDIOBOT_LOCALE"))
    settle_ms: int = field(default_factory=lambda: _env_int("STUDIOBOT_SETTLE_MS", Timings.settle_ms))
    element_timeout_ms: int = field(
        default_factory=lambda: _env_int("STUDIOBOT_ELEMENT_TIMEOUT_MS", Timings.element_timeout_ms)
    )

    def to_bot_config(self) -> BotConfig:
        """Build the immutable run configuration from these settings."""

        order = self.sort_order.strip().lower()
        if order not in SORT_ORDERS:
            raise ValueError(f"Unsupported sort order: {self.sort_order!r}")
        return BotConfig(
            mode=Mode.parse(self.mode),
            debug=self.debug,
            made_for_kids=self.made_for_kids,
            visibility=Visibility.parse(self.visibility),
            sort_compare=SORT_ORDERS[order],
            timings=Timings(
                settle_ms=self.settle_ms,
                element_timeout_ms=self.element_timeout_ms,
            ),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()

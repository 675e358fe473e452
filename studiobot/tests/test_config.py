"""Tests for run configuration and environment settings."""
from __future__ import annotations

from functools import cmp_to_key

import pytest

from studiobot.browser.selectors import Ordinals, made_for_kids_radio
from studiobot.config import (
    BotConfig,
    Mode,
    Settings,
    Timings,
    Visibility,
    natural_compare,
    reverse_compare,
)


@pytest.mark.parametrize(
    ("names", "expected"),
    [
        (["b2", "a10", "a2"], ["a2", "a10", "b2"]),
        (["Track 9", "track 10", "Track 1"], ["Track 1", "Track 9", "track 10"]),
        (["École", "eclair", "Ecole 2"], ["eclair", "École", "Ecole 2"]),
        (["v1.10", "v1.9", "v1.2"], ["v1.2", "v1.9", "v1.10"]),
        (["2nd", "10th", "alpha"], ["2nd", "10th", "alpha"]),
        (
            ["1 Song", "#1 Song", "[4K] Intro", "Intro", "a1", "a_1", "a 1"],
            ["[4K] Intro", "#1 Song", "1 Song", "a 1", "a_1", "a1", "Intro"],
        ),
        (["~tilde", "$5 deal", "+plus", "(live)"], ["(live)", "+plus", "~tilde", "$5 deal"]),
    ],
)
def test_natural_compare_orders_like_a_person(names, expected) -> None:
    assert sorted(names, key=cmp_to_key(natural_compare)) == expected


def test_natural_compare_ignores_case_and_accents() -> None:
    assert natural_compare("Intro", "intro") == 0
    assert natural_compare("résumé", "RESUME") == 0
    assert natural_compare("a", "b") == -1
    assert natural_compare("b", "a") == 1
    assert natural_compare("a1", "a01") == 0


def test_natural_compare_ranks_character_classes() -> None:
    ordered = ["a x", "a_x", "a+x", "a$x", "a9x", "ax"]

    for lower, higher in zip(ordered, ordered[1:]):
        assert natural_compare(lower, higher) == -1, (lower, higher)


def test_reverse_compare_flips_the_order() -> None:
    descending = reverse_compare(natural_compare)

    assert descending("a2", "a10") == 1
    assert sorted(["a2", "a10", "b2"], key=cmp_to_key(descending)) == ["b2", "a10", "a2"]


def test_visibility_ordering_and_parsing() -> None:
    assert Visibility.PRIVATE < Visibility.UNLISTED < Visibility.PUBLIC
    assert Visibility.parse("Unlisted") is Visibility.UNLISTED
    assert Visibility.parse(" public ") is Visibility.PUBLIC
    assert Visibility.PRIVATE.label == "Private"
    with pytest.raises(ValueError):
        Visibility.parse("friends-only")


def test_mode_parsing_accepts_cli_spelling() -> None:
    assert Mode.parse("publish-drafts") is Mode.PUBLISH_DRAFTS
    assert Mode.parse("sort_playlist") is Mode.SORT_PLAYLIST
    with pytest.raises(ValueError):
        Mode.parse("delete_everything")


def test_ordinal_table_matches_studio_layout() -> None:
    assert [Ordinals.VISIBILITY[level] for level in Visibility] == [0, 1, 2]
    assert (Ordinals.MOVE_TO_TOP, Ordinals.MOVE_TO_BOTTOM) == (4, 5)
    assert made_for_kids_radio(True) == "tp-yt-paper-radio-button:nth-child(1)"
    assert made_for_kids_radio(False) == "tp-yt-paper-radio-button:nth-child(2)"


def test_defaults_publish_unlisted_not_for_kids() -> None:
    config = BotConfig()

    assert config.mode is Mode.PUBLISH_DRAFTS
    assert config.visibility is Visibility.UNLISTED
    assert config.made_for_kids is False
    assert config.timings == Timings(
        poll_interval_ms=10,
        element_timeout_ms=5000,
        probe_timeout_ms=20,
        settle_ms=50,
        classify_pause_ms=1000,
        move_pause_ms=500,
    )


def test_with_overrides_ignores_unset_values() -> None:
    config = BotConfig().with_overrides(visibility=Visibility.PUBLIC, made_for_kids=None, debug=False)

    assert config.visibility is Visibility.PUBLIC
    assert config.made_for_kids is False
    assert config.debug is False


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("STUDIOBOT_MODE", "sort_playlist")
    monkeypatch.setenv("STUDIOBOT_DEBUG", "no")
    monkeypatch.setenv("STUDIOBOT_MADE_FOR_KIDS", "yes")
    monkeypatch.setenv("STUDIOBOT_VISIBILITY", "private")
    monkeypatch.setenv("STUDIOBOT_SORT_ORDER", "desc")
    monkeypatch.setenv("STUDIOBOT_SETTLE_MS", "250")

    config = Settings().to_bot_config()

    assert config.mode is Mode.SORT_PLAYLIST
    assert config.debug is False
    assert config.made_for_kids is True
    assert config.visibility is Visibility.PRIVATE
    assert config.sort_compare("a", "b") == 1
    assert config.timings.settle_ms == 250
    assert config.timings.element_timeout_ms == 5000


def test_settings_reject_unknown_sort_order(monkeypatch) -> None:
    monkeypatch.setenv("STUDIOBOT_SORT_ORDER", "random")

    with pytest.raises(ValueError):
        Settings().to_bot_config()

"""Tests for level, unlock and milestone rules."""

import pytest

from swell.core.domain.gamification import (
    LEVEL_THRESHOLDS,
    compute_level,
    compute_unlocks,
    is_level_up,
    milestone_message,
    milestone_progress,
)


@pytest.mark.parametrize(
    "total_xp, expected_level, expected_label",
    [
        (0, 0, "Arriving"),
        (49, 0, "Arriving"),
        (50, 1, "Settling In"),
        (140, 2, "Steady Current"),
        (259, 2, "Steady Current"),
        (260, 3, "Deep Work"),
        (420, 4, "Lighthouse"),
        (620, 5, "Anchor Point"),
        (5000, 5, "Anchor Point"),
    ],
)
def test_compute_level(total_xp: int, expected_level: int, expected_label: str) -> None:
    meta = compute_level(total_xp)

    assert meta.level == expected_level
    assert meta.label == expected_label
    assert meta.current_xp == total_xp


def test_level_is_monotonic() -> None:
    levels = [compute_level(xp).level for xp in range(0, 1000)]

    assert levels == sorted(levels)


def test_progress_zero_exactly_at_threshold() -> None:
    for threshold in LEVEL_THRESHOLDS:
        assert compute_level(threshold).progress == 0.0


def test_progress_just_below_next_threshold() -> None:
    meta = compute_level(139)

    assert meta.level == 1
    assert meta.next_level_xp == 140
    assert meta.progress == pytest.approx(89 / 90)
    assert meta.progress < 1.0


def test_progress_always_in_unit_interval() -> None:
    for xp in range(-10, 1200, 7):
        assert 0.0 <= compute_level(xp).progress <= 1.0


def test_open_level_uses_synthetic_bound() -> None:
    meta = compute_level(720)

    assert meta.level == 5
    assert meta.next_level_xp == 820
    assert meta.progress == pytest.approx(0.5)
    assert compute_level(10_000).progress == 1.0


def test_negative_xp_is_level_zero() -> None:
    meta = compute_level(-5)

    assert meta.level == 0
    assert meta.progress == 0.0


def test_unlocks_start_with_shore() -> None:
    assert compute_unlocks(0, 0) == {"shore"}


def test_unlocks_thresholds() -> None:
    assert "towel" in compute_unlocks(20, 0)
    assert "towel" not in compute_unlocks(19, 0)

    unlocks = compute_unlocks(60, 12)
    assert {"shore", "towel", "palms", "coral", "reef"} <= unlocks
    assert "dock" not in unlocks
    assert "fish" not in unlocks


def test_unlocks_full_set() -> None:
    assert compute_unlocks(220, 30) == {
        "shore",
        "towel",
        "palms",
        "dock",
        "lighthouse",
        "coral",
        "reef",
        "fish",
        "campfire",
    }


def test_unlocks_metrics_are_independent() -> None:
    """Shells alone unlock reef items, XP alone unlocks land items."""
    assert compute_unlocks(0, 30) == {"shore", "coral", "reef", "fish", "campfire"}
    assert compute_unlocks(220, 0) == {"shore", "towel", "palms", "dock", "lighthouse"}


def test_unlocks_are_monotonic() -> None:
    previous: frozenset[str] = frozenset()
    for step in range(0, 40):
        current = compute_unlocks(step * 10, step)
        assert previous <= current
        previous = current


def test_milestones() -> None:
    milestones = milestone_progress(130)

    assert [m.unlocked for m in milestones] == [True, True, False, False, False]
    assert milestones[2].remaining_xp == 90
    assert milestone_message(milestones[0]) == (
        "Towel and shade is already part of your beach experience."
    )
    assert milestone_message(milestones[2]) == (
        "Earn 90 more XP to unlock Palms and quiet cove."
    )


def test_is_level_up() -> None:
    assert is_level_up(45, 55)
    assert not is_level_up(50, 139)

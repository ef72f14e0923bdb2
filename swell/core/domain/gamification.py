"""
Gamification Domain Rules - pure functions for level, unlocks and milestones.

AICODE-NOTE: Pure functions without storage access or side effects.
Inputs are ledger totals; the progression model calls these on every read.
"""

from typing import Literal

from swell.core.models import LevelMeta, Milestone

LEVEL_THRESHOLDS: tuple[int, ...] = (0, 50, 140, 260, 420, 620)

LEVEL_LABELS: tuple[str, ...] = (
    "Arriving",
    "Settling In",
    "Steady Current",
    "Deep Work",
    "Lighthouse",
    "Anchor Point",
)

# Span of the synthetic level past the last threshold
OPEN_LEVEL_SPAN = 200

UnlockMetric = Literal["xp", "shells"]

# (metric, threshold, token) - independent and monotonic
UNLOCK_RULES: tuple[tuple[UnlockMetric, int, str], ...] = (
    ("xp", 0, "shore"),
    ("xp", 20, "towel"),
    ("xp", 60, "palms"),
    ("xp", 120, "dock"),
    ("xp", 220, "lighthouse"),
    ("shells", 6, "coral"),
    ("shells", 12, "reef"),
    ("shells", 20, "fish"),
    ("shells", 30, "campfire"),
)

MILESTONES: tuple[tuple[int, str], ...] = (
    (50, "Towel and shade"),
    (120, "Dock on the water"),
    (220, "Palms and quiet cove"),
    (360, "Lighthouse marker"),
    (520, "Night fire and reef"),
)


def compute_level(total_xp: int) -> LevelMeta:
    """
    Derive level metadata from total XP.

    Level is the greatest index i with LEVEL_THRESHOLDS[i] <= total_xp.
    Past the last threshold the next bound is threshold + 200.

    Examples:
    - 0 XP   -> level 0, progress 0.0
    - 140 XP -> level 2, progress 0.0
    - 259 XP -> level 2, progress ~0.99

    Args:
        total_xp: Cumulative XP (negative is treated as level 0)

    Returns:
        LevelMeta with progress in [0, 1]
    """
    level = 0
    for i, threshold in enumerate(LEVEL_THRESHOLDS):
        if total_xp >= threshold:
            level = i

    current_base = LEVEL_THRESHOLDS[level]
    if level + 1 < len(LEVEL_THRESHOLDS):
        next_base = LEVEL_THRESHOLDS[level + 1]
    else:
        next_base = current_base + OPEN_LEVEL_SPAN

    span = (next_base - current_base) or 1
    progress = max(0.0, min(1.0, (total_xp - current_base) / span))

    return LevelMeta(
        level=level,
        current_xp=total_xp,
        next_level_xp=next_base,
        progress=progress,
        label=LEVEL_LABELS[level],
    )


def compute_unlocks(total_xp: int, total_shells: int) -> frozenset[str]:
    """
    Tokens whose threshold is met.

    "shore" is always present. Rules do not depend on each other, so the
    result does not depend on rule order.
    """
    metrics = {"xp": total_xp, "shells": total_shells}
    return frozenset(
        token
        for metric, threshold, token in UNLOCK_RULES
        if metrics[metric] >= threshold
    )


def milestone_progress(total_xp: int) -> list[Milestone]:
    """Beach milestones with their unlocked state and remaining XP."""
    return [
        Milestone(
            xp=xp,
            label=label,
            unlocked=total_xp >= xp,
            remaining_xp=max(0, xp - total_xp),
        )
        for xp, label in MILESTONES
    ]


def milestone_message(milestone: Milestone) -> str:
    if milestone.unlocked:
        return f"{milestone.label} is already part of your beach experience."
    return f"Earn {milestone.remaining_xp} more XP to unlock {milestone.label}."


def is_level_up(before_xp: int, after_xp: int) -> bool:
    """True if after_xp lands on a higher level than before_xp."""
    return compute_level(after_xp).level > compute_level(before_xp).level

"""
Reward Domain Rules - guardrail, tier bonus, clamp and shell derivation.

AICODE-NOTE: Pure functions without I/O. The reward use-case and the scoring
endpoint both call is_low_effort() so a "no" answer is never sent to the LLM.

Shell policy: shells are derived from the final XP (shells_for_xp) on every
path. Mission.reward_shells is only the face value shown on the card.
"""

import math
import re
from typing import Any

MIN_XP = 10
MAX_XP = 60

# Guardrail short-circuit
GUARDRAIL_XP = 10
GUARDRAIL_NOTE = (
    "Thanks for being honest. Notice this moment and let's try a small rep next time."
)

# Scorer unreachable
FALLBACK_XP = 10

# Scorer replied without a usable score
DEFAULT_SCORE_XP = 20
DEFAULT_NOTE = "Nice rep. Keep going."

TIER_BONUS: dict[str, int] = {"stretch": 4, "core": 2, "easy": 0}

# (min_xp, shells), checked top-down
SHELL_STEPS: tuple[tuple[int, int], ...] = ((50, 4), (35, 3), (20, 2))
MIN_SHELLS = 1

_NEGATIVE_ANSWER = re.compile(r"^(no|nope|nah)$", re.IGNORECASE)
_ADMITTED_SKIP = re.compile(r"didn.?t do|did not do", re.IGNORECASE)
_NOTHING = re.compile(r"nothing", re.IGNORECASE)


def is_low_effort(reflection: str | None) -> bool:
    """
    Decide whether a reflection admits no real effort.

    Rules:
    - empty or whitespace only
    - exactly "no" / "nope" / "nah" (any case, surrounding spaces ignored)
    - contains "didn't do" (any apostrophe or none), "did not do" or "nothing"
    """
    if not reflection or not reflection.strip():
        return True
    text = reflection.strip()
    return bool(
        _NEGATIVE_ANSWER.match(text)
        or _ADMITTED_SKIP.search(text)
        or _NOTHING.search(text)
    )


def coerce_score(value: Any) -> float | None:
    """Return value as a finite number, or None if it is not one."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def apply_tier_bonus(xp: float, tier: str) -> float:
    """Stretch +4, core +2, easy and unknown tiers +0."""
    return xp + TIER_BONUS.get(tier, 0)


def clamp_xp(xp: float) -> int:
    """Force XP into [MIN_XP, MAX_XP] as a whole number."""
    value = coerce_score(xp)
    if value is None:
        return MIN_XP
    return int(max(MIN_XP, min(MAX_XP, round(value))))


def shells_for_xp(xp: int) -> int:
    """
    Shells granted for a final XP value.

    - >= 50: 4
    - >= 35: 3
    - >= 20: 2
    - else: 1
    """
    for min_xp, shells in SHELL_STEPS:
        if xp >= min_xp:
            return shells
    return MIN_SHELLS

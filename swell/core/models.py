"""
Value types shared by domain rules, use-cases and interfaces.

AICODE-NOTE: Everything here is immutable. Totals, levels and unlocks are
never stored on these objects, they are derived from the entry ledger.
"""

from dataclasses import dataclass
from datetime import date
from typing import Literal, get_args

Tier = Literal["easy", "core", "stretch"]
Focus = Literal["relationships", "stress", "performance"]
RewardSource = Literal["guardrail", "scorer", "default", "fallback"]

TIERS: tuple[str, ...] = get_args(Tier)
FOCUSES: tuple[str, ...] = get_args(Focus)


@dataclass(frozen=True)
class Mission:
    """One of the three daily missions."""

    id: str
    label: str
    xp: int
    tier: Tier
    reward_shells: int
    requires_reflection: bool


@dataclass(frozen=True)
class DailyContent:
    prompt: str
    missions: list[Mission]


@dataclass(frozen=True)
class Entry:
    """A completed mission in the ledger. Unique per (date, mission_id)."""

    id: str
    date: date
    mission_id: str
    xp: int
    shells: int
    focus: Focus = "relationships"
    reflection: str | None = None


@dataclass(frozen=True)
class LevelMeta:
    level: int
    current_xp: int
    next_level_xp: int
    progress: float  # 0.0 - 1.0
    label: str


@dataclass(frozen=True)
class Milestone:
    xp: int
    label: str
    unlocked: bool
    remaining_xp: int


@dataclass(frozen=True)
class ScoreRequest:
    """Payload sent to the scoring endpoint."""

    mission_text: str
    reflection: str
    current_xp: int
    streak: int
    tier: str

    def to_payload(self) -> dict:
        return {
            "missionText": self.mission_text,
            "reflection": self.reflection,
            "currentXp": self.current_xp,
            "streak": self.streak,
            "tier": self.tier,
        }


@dataclass(frozen=True)
class ScoreResult:
    """Parsed scorer reply, before tier bonus and clamp."""

    xp: float
    note: str


@dataclass(frozen=True)
class RewardOutcome:
    """Finalized reward for one claim."""

    xp: int
    shells: int
    note: str | None
    source: RewardSource

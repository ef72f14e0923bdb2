"""
Pydantic schemas for the API.

AICODE-NOTE: /score-mission keeps the camelCase wire contract
{missionText, reflection, currentXp, streak, tier} -> {xp, note}.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from swell.core.models import ScoreRequest
from swell.exceptions import ValidationError

# ============ Scoring Schemas ============


class ScoreMissionRequest(BaseModel):
    """Scoring request from the app."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mission_text: str | None = None
    reflection: str | None = None
    current_xp: int | None = 0
    streak: int | None = 0
    tier: str | None = None

    def to_domain(self) -> ScoreRequest:
        if not self.mission_text or not self.mission_text.strip():
            raise ValidationError("missionText is required")
        return ScoreRequest(
            mission_text=self.mission_text,
            reflection=self.reflection or "",
            current_xp=self.current_xp or 0,
            streak=self.streak or 0,
            tier=self.tier or "unknown",
        )


class ScoreMissionResponse(BaseModel):
    xp: int
    note: str


# ============ Daily Schemas ============


class MissionResponse(BaseModel):
    """Mission card."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    label: str
    xp: int
    tier: str
    tier_label: str
    reward_shells: int
    requires_reflection: bool
    completed: bool = False


class DailyResponse(BaseModel):
    """Today's prompt and missions."""

    date: date
    focus: str
    prompt: str
    missions: list[MissionResponse]
    completed_count: int


# ============ Progress Schemas ============


class LevelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: int
    current_xp: int
    next_level_xp: int
    progress: float  # 0.0 - 1.0
    label: str


class MilestoneResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    xp: int
    label: str
    unlocked: bool
    remaining_xp: int
    message: str


class EntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: date
    mission_id: str
    xp: int
    shells: int
    focus: str
    focus_label: str = ""
    reflection: str | None = None


class ProgressResponse(BaseModel):
    """Totals and everything derived from them."""

    total_xp: int
    total_shells: int
    level: LevelResponse
    unlocks: list[str]
    current_streak: int
    longest_streak: int
    streak_text: str
    milestones: list[MilestoneResponse]
    entries: list[EntryResponse]


# ============ Claim Schemas ============


class ReflectionRequest(BaseModel):
    reflection: str = Field(default="", max_length=2000)


class ClaimResponse(BaseModel):
    """Result of a claim step."""

    status: str
    mission_id: str
    xp_earned: int = 0
    shells_earned: int = 0
    note: str | None = None
    total_xp: int
    total_shells: int
    level: int
    leveled_up: bool = False

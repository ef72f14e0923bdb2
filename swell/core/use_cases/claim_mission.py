"""
Claim Mission Use Case - claim -> (reflection) -> score -> record.

AICODE-NOTE: At most one outstanding claim per mission; different missions
may be in flight at the same time. Pending reflections, claim state and the
abandonment counter are all keyed by mission id. Correctness of "one reward
per mission per day" rests on EntryLog uniqueness, not on locking: the
duplicate check runs when the claim starts and again when the entry is
recorded.

States (per mission):
IDLE -> COLLECTING_REFLECTION (core/stretch) -> REMOTE_SCORE_PENDING
     -> REWARD_APPLIED
A claim cancelled while the score is pending is discarded and the mission
stays unclaimed.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from swell.core.domain.gamification import is_level_up
from swell.core.models import Entry, Focus, Mission, RewardOutcome
from swell.core.progression import ProgressionState
from swell.core.use_cases.score_reward import ScoreRewardUseCase
from swell.services.scoring_client import MissionScorer

logger = logging.getLogger(__name__)


class ClaimState(str, Enum):
    IDLE = "idle"
    COLLECTING_REFLECTION = "collecting_reflection"
    REMOTE_SCORE_PENDING = "remote_score_pending"
    REWARD_APPLIED = "reward_applied"


class ClaimStatus(str, Enum):
    APPLIED = "applied"
    DUPLICATE = "duplicate"
    COLLECTING_REFLECTION = "collecting_reflection"
    ABANDONED = "abandoned"
    NO_PENDING = "no_pending"


@dataclass
class ClaimResult:
    """Result of a claim step."""

    status: ClaimStatus
    mission_id: str = ""
    entry: Entry | None = None
    outcome: RewardOutcome | None = None
    total_xp: int = 0
    total_shells: int = 0
    level: int = 0
    leveled_up: bool = False


class ClaimMissionUseCase:
    """Claim flow for one session."""

    def __init__(
        self,
        progression: ProgressionState,
        scorer: MissionScorer,
        focus: Focus = "relationships",
    ):
        self.progression = progression
        self.reward = ScoreRewardUseCase(scorer)
        self.focus = focus
        self._states: dict[str, ClaimState] = {}
        self._pending: dict[str, tuple[Mission, date, Focus]] = {}
        # Bumped on apply/cancel of a mission; a stale score sees a different value
        self._generations: dict[str, int] = {}

    def state_of(self, mission_id: str) -> ClaimState:
        return self._states.get(mission_id, ClaimState.IDLE)

    def pending_for(self, mission_id: str) -> Mission | None:
        """Mission waiting for its reflection, if any."""
        pending = self._pending.get(mission_id)
        return pending[0] if pending else None

    @property
    def pending_missions(self) -> list[Mission]:
        return [pending[0] for pending in self._pending.values()]

    def _result(self, status: ClaimStatus, mission: Mission) -> ClaimResult:
        return ClaimResult(
            status=status,
            mission_id=mission.id,
            total_xp=self.progression.total_xp,
            total_shells=self.progression.total_shells,
            level=self.progression.level_meta().level,
        )

    def _bump(self, mission_id: str) -> int:
        self._generations[mission_id] = self._generations.get(mission_id, 0) + 1
        return self._generations[mission_id]

    async def claim_mission(
        self, mission: Mission, today: date, focus: Focus | None = None
    ) -> ClaimResult:
        """
        Start a claim.

        Missions without a reflection are scored and recorded right away.
        Others move to COLLECTING_REFLECTION and wait for confirm_reflection().
        focus defaults to the session focus and is stored on the entry.
        """
        if self.progression.is_claimed(today, mission.id):
            return self._result(ClaimStatus.DUPLICATE, mission)

        focus = focus or self.focus
        if mission.requires_reflection:
            self._pending[mission.id] = (mission, today, focus)
            self._states[mission.id] = ClaimState.COLLECTING_REFLECTION
            return self._result(ClaimStatus.COLLECTING_REFLECTION, mission)

        return await self._apply(mission, today, focus, "")

    async def confirm_reflection(self, mission_id: str, reflection: str) -> ClaimResult:
        """Submit the reflection for a pending mission."""
        pending = self._pending.get(mission_id)
        if pending is None:
            return ClaimResult(status=ClaimStatus.NO_PENDING, mission_id=mission_id)
        mission, day, focus = pending
        return await self._apply(mission, day, focus, reflection)

    def cancel_reflection(self, mission_id: str) -> None:
        """Drop a pending mission; its score, if still in flight, will be discarded."""
        self._pending.pop(mission_id, None)
        self._bump(mission_id)
        self._states[mission_id] = ClaimState.IDLE

    async def _apply(
        self, mission: Mission, day: date, focus: Focus, reflection: str
    ) -> ClaimResult:
        generation = self._bump(mission.id)
        self._states[mission.id] = ClaimState.REMOTE_SCORE_PENDING

        outcome = await self.reward.execute(
            mission,
            reflection,
            current_xp=self.progression.total_xp,
            streak=self.progression.current_streak(day),
        )

        if generation != self._generations[mission.id]:
            logger.info(f"Claim for {mission.id} abandoned, discarding reward")
            return self._result(ClaimStatus.ABANDONED, mission)

        self._pending.pop(mission.id, None)

        text = reflection.strip()
        entry = Entry(
            id=f"{day.isoformat()}-{mission.id}",
            date=day,
            mission_id=mission.id,
            xp=outcome.xp,
            shells=outcome.shells,
            focus=focus,
            reflection=text or None,
        )
        # Totals may have moved while the score was pending
        before_xp = self.progression.total_xp
        if not self.progression.record_entry(entry):
            self._states[mission.id] = ClaimState.IDLE
            return self._result(ClaimStatus.DUPLICATE, mission)

        self._states[mission.id] = ClaimState.REWARD_APPLIED
        after = self.progression.level_meta()
        leveled_up = is_level_up(before_xp, self.progression.total_xp)

        logger.info(
            f"Mission {mission.id} claimed: +{outcome.xp} XP, +{outcome.shells} shells "
            f"({outcome.source})"
        )
        if leveled_up:
            logger.info(f"Level up: {after.level} ({after.label})")

        return ClaimResult(
            status=ClaimStatus.APPLIED,
            mission_id=mission.id,
            entry=entry,
            outcome=outcome,
            total_xp=self.progression.total_xp,
            total_shells=self.progression.total_shells,
            level=after.level,
            leveled_up=leveled_up,
        )

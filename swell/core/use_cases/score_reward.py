"""
Score Reward Use Case - turn a claimed mission and its reflection into XP/shells.

AICODE-NOTE: execute() never raises. Order of stages:
1. guardrail (sync, before any remote call) -> fixed 10 XP, scorer skipped
2. remote score -> tier bonus
3. clamp to [10, 60]
4. shells from final XP
Scorer unavailable -> 10 XP. Malformed reply -> default 20 XP, then bonus.
"""

import logging
from dataclasses import dataclass

from swell.core.domain.reward_rules import (
    DEFAULT_NOTE,
    DEFAULT_SCORE_XP,
    FALLBACK_XP,
    GUARDRAIL_NOTE,
    GUARDRAIL_XP,
    apply_tier_bonus,
    clamp_xp,
    coerce_score,
    is_low_effort,
    shells_for_xp,
)
from swell.core.models import Mission, RewardOutcome, RewardSource, ScoreRequest
from swell.exceptions import MalformedScorerResponse, ScorerUnavailable
from swell.services.scoring_client import MissionScorer

logger = logging.getLogger(__name__)


def _outcome(xp: float, note: str | None, source: RewardSource) -> RewardOutcome:
    final_xp = clamp_xp(xp)
    return RewardOutcome(
        xp=final_xp,
        shells=shells_for_xp(final_xp),
        note=note,
        source=source,
    )


@dataclass
class ScoreRewardUseCase:
    """Reward pipeline for a single claim."""

    scorer: MissionScorer

    async def execute(
        self,
        mission: Mission,
        reflection: str | None,
        current_xp: int,
        streak: int,
    ) -> RewardOutcome:
        """
        Decide the reward for a claim.

        Args:
            mission: Claimed mission
            reflection: Free-text reflection ("" for missions without one)
            current_xp: User total XP before this claim
            streak: Current streak in days

        Returns:
            RewardOutcome with xp in [10, 60] and shells >= 1
        """
        text = (reflection or "").strip()

        # 1. Guardrail
        if is_low_effort(text):
            logger.info(f"Guardrail short-circuit for mission {mission.id}")
            return _outcome(GUARDRAIL_XP, GUARDRAIL_NOTE, "guardrail")

        # 2. Remote score
        request = ScoreRequest(
            mission_text=mission.label,
            reflection=text,
            current_xp=current_xp,
            streak=streak,
            tier=mission.tier,
        )
        try:
            result = await self.scorer.score(request)
        except ScorerUnavailable as e:
            logger.warning(f"Scorer unavailable for mission {mission.id}: {e}")
            return _outcome(FALLBACK_XP, None, "fallback")
        except MalformedScorerResponse as e:
            logger.error(f"Malformed scorer reply for mission {mission.id}: {e} {e.raw!r}")
            xp = apply_tier_bonus(DEFAULT_SCORE_XP, mission.tier)
            return _outcome(xp, DEFAULT_NOTE, "default")
        except Exception as e:
            logger.exception(f"Unexpected scorer failure for mission {mission.id}: {e}")
            return _outcome(FALLBACK_XP, None, "fallback")

        raw_xp = coerce_score(result.xp)
        if raw_xp is None:
            logger.error(f"Non-numeric score {result.xp!r} for mission {mission.id}")
            xp = apply_tier_bonus(DEFAULT_SCORE_XP, mission.tier)
            return _outcome(xp, DEFAULT_NOTE, "default")

        # 3-4. Tier bonus, clamp
        xp = apply_tier_bonus(raw_xp, mission.tier)
        outcome = _outcome(xp, result.note, "scorer")
        logger.info(
            f"Scored mission {mission.id} ({mission.tier}): "
            f"raw {result.xp} -> {outcome.xp} XP, {outcome.shells} shells"
        )
        return outcome

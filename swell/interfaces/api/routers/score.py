"""
Scoring API router.

Endpoints:
- POST /score-mission - Score a reflection with the LLM rubric

The reply is the rubric score clamped to [10, 60]. The tier bonus is added
once, by the client reward pipeline.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from swell.core.domain.reward_rules import (
    GUARDRAIL_NOTE,
    GUARDRAIL_XP,
    clamp_xp,
    is_low_effort,
)
from swell.exceptions import ScorerUnavailable, ValidationError
from swell.interfaces.api.schemas import ScoreMissionRequest, ScoreMissionResponse
from swell.services.ai import AIService, ai_service

router = APIRouter(tags=["scoring"])
logger = logging.getLogger(__name__)


def get_ai_service() -> AIService:
    return ai_service


@router.post("/score-mission", response_model=ScoreMissionResponse)
async def score_mission(
    request: ScoreMissionRequest,
    ai: AIService = Depends(get_ai_service),
) -> ScoreMissionResponse:
    """
    Score a mission reflection.

    - Low-effort reflections ("", "no", "nothing", ...) get 10 XP without
      calling the model.
    - Missing missionText -> 400.
    - Model unreachable -> 502.
    """
    if is_low_effort(request.reflection):
        return ScoreMissionResponse(xp=GUARDRAIL_XP, note=GUARDRAIL_NOTE)

    try:
        score_request = request.to_domain()
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    try:
        result = await ai.score_reflection(score_request)
    except ScorerUnavailable as e:
        logger.error(f"Scoring model failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="model request failed",
        ) from e

    xp = clamp_xp(result.xp)
    logger.info(f"Scored {score_request.tier} mission: {result.xp} -> {xp} XP")
    return ScoreMissionResponse(xp=xp, note=result.note)

"""
Progress API router.

Endpoints:
- GET /api/progress - Totals, level, unlocks, streaks, milestones, history
- POST /api/missions/{id}/claim - Claim one of today's missions
- POST /api/missions/{id}/reflection - Submit the reflection for a pending claim
- DELETE /api/missions/{id}/reflection - Cancel a pending claim
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from swell.core.domain.content_generation import find_mission, focus_label
from swell.core.domain.gamification import milestone_message
from swell.core.models import Focus
from swell.core.use_cases.claim_mission import ClaimResult
from swell.core.use_cases.get_progress import get_progress
from swell.interfaces.api.schemas import (
    ClaimResponse,
    EntryResponse,
    LevelResponse,
    MilestoneResponse,
    ProgressResponse,
    ReflectionRequest,
)
from swell.interfaces.api.session import GameSession, get_session, get_today

router = APIRouter(prefix="/api", tags=["progress"])
logger = logging.getLogger(__name__)


def _claim_response(result: ClaimResult) -> ClaimResponse:
    outcome = result.outcome
    return ClaimResponse(
        status=result.status.value,
        mission_id=result.mission_id,
        xp_earned=outcome.xp if outcome else 0,
        shells_earned=outcome.shells if outcome else 0,
        note=outcome.note if outcome else None,
        total_xp=result.total_xp,
        total_shells=result.total_shells,
        level=result.level,
        leveled_up=result.leveled_up,
    )


def _check_pending(session: GameSession, mission_id: str) -> None:
    if session.claims.pending_for(mission_id) is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No reflection pending for this mission",
        )


@router.get("/progress", response_model=ProgressResponse)
async def read_progress(
    session: GameSession = Depends(get_session),
    today: date = Depends(get_today),
) -> ProgressResponse:
    """Everything here is recomputed from the ledger on each request."""
    snapshot = get_progress(session.progression, today)

    return ProgressResponse(
        total_xp=snapshot.total_xp,
        total_shells=snapshot.total_shells,
        level=LevelResponse.model_validate(snapshot.level),
        unlocks=snapshot.unlocks,
        current_streak=snapshot.current_streak,
        longest_streak=snapshot.longest_streak,
        streak_text=snapshot.streak_text,
        milestones=[
            MilestoneResponse(
                xp=m.xp,
                label=m.label,
                unlocked=m.unlocked,
                remaining_xp=m.remaining_xp,
                message=milestone_message(m),
            )
            for m in snapshot.milestones
        ],
        entries=[
            EntryResponse(
                id=e.id,
                date=e.date,
                mission_id=e.mission_id,
                xp=e.xp,
                shells=e.shells,
                focus=e.focus,
                focus_label=focus_label(e.focus),
                reflection=e.reflection,
            )
            for e in snapshot.entries
        ],
    )


@router.post("/missions/{mission_id}/claim", response_model=ClaimResponse)
async def claim_mission(
    mission_id: str,
    focus: Focus = "relationships",
    session: GameSession = Depends(get_session),
    today: date = Depends(get_today),
) -> ClaimResponse:
    """
    Claim a mission.

    Easy missions are rewarded immediately. Core and stretch missions return
    status "collecting_reflection". A repeated claim returns "duplicate".
    """
    mission = find_mission(today, mission_id)
    if not mission:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Mission not found",
        )

    result = await session.claims.claim_mission(mission, today, focus)
    return _claim_response(result)


@router.post("/missions/{mission_id}/reflection", response_model=ClaimResponse)
async def submit_reflection(
    mission_id: str,
    request: ReflectionRequest,
    session: GameSession = Depends(get_session),
) -> ClaimResponse:
    """Score the reflection and record the reward."""
    _check_pending(session, mission_id)

    result = await session.claims.confirm_reflection(mission_id, request.reflection)
    logger.info(f"Reflection for {mission_id} processed: {result.status.value}")
    return _claim_response(result)


@router.delete("/missions/{mission_id}/reflection")
async def cancel_reflection(
    mission_id: str,
    session: GameSession = Depends(get_session),
) -> dict[str, str]:
    """Drop the pending claim; the mission stays unclaimed."""
    _check_pending(session, mission_id)
    session.claims.cancel_reflection(mission_id)
    return {"status": "cancelled", "mission_id": mission_id}

"""
Daily API router.

Endpoints:
- GET /api/daily - Today's prompt and missions with completion flags
"""

from datetime import date

from fastapi import APIRouter, Depends

from swell.core.domain.content_generation import generate_daily, tier_label
from swell.core.models import Focus
from swell.interfaces.api.schemas import DailyResponse, MissionResponse
from swell.interfaces.api.session import GameSession, get_session, get_today

router = APIRouter(prefix="/api", tags=["daily"])


@router.get("/daily", response_model=DailyResponse)
async def get_daily(
    focus: Focus = "relationships",
    session: GameSession = Depends(get_session),
    today: date = Depends(get_today),
) -> DailyResponse:
    """Same day -> same prompt and missions."""
    content = generate_daily(today, focus)
    completed = session.progression.completed_mission_ids(today)

    missions = [
        MissionResponse(
            id=m.id,
            label=m.label,
            xp=m.xp,
            tier=m.tier,
            tier_label=tier_label(m.tier),
            reward_shells=m.reward_shells,
            requires_reflection=m.requires_reflection,
            completed=m.id in completed,
        )
        for m in content.missions
    ]

    return DailyResponse(
        date=today,
        focus=focus,
        prompt=content.prompt,
        missions=missions,
        completed_count=sum(1 for m in missions if m.completed),
    )

"""
Session dependencies for the API.

AICODE-NOTE: Single user, in-memory. The ledger lives as long as the process;
there is no persistence and no authentication.
"""

from datetime import date

from swell.core.models import Focus
from swell.core.progression import ProgressionState
from swell.core.use_cases.claim_mission import ClaimMissionUseCase
from swell.services.scoring_client import MissionScorer, ScoringClient
from swell.utils.day_key import today_id


class GameSession:
    """Ledger plus claim flow for the one session this process serves."""

    def __init__(self, scorer: MissionScorer | None = None, focus: Focus = "relationships"):
        self.progression = ProgressionState()
        self.claims = ClaimMissionUseCase(
            self.progression, scorer or ScoringClient(), focus=focus
        )


_session: GameSession | None = None


def get_session() -> GameSession:
    global _session
    if _session is None:
        _session = GameSession()
    return _session


def get_today() -> date:
    return today_id()

import os
import sys
from datetime import date, timedelta

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from swell.core.models import Entry, ScoreRequest, ScoreResult  # noqa: E402
from swell.core.progression import ProgressionState  # noqa: E402

TODAY = date(2026, 10, 19)


class StubScorer:
    """Records requests and replies with a fixed result or error."""

    def __init__(self, result: ScoreResult | None = None, error: Exception | None = None):
        self.result = result or ScoreResult(xp=45, note="Solid rep.")
        self.error = error
        self.requests: list[ScoreRequest] = []

    async def score(self, request: ScoreRequest) -> ScoreResult:
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_scorer():
    def _make(result: ScoreResult | None = None, error: Exception | None = None) -> StubScorer:
        return StubScorer(result=result, error=error)

    return _make


@pytest.fixture
def make_entry():
    def _make(day: date, mission_id: str = "m-1", xp: int = 20, shells: int = 2) -> Entry:
        return Entry(
            id=f"{day.isoformat()}-{mission_id}",
            date=day,
            mission_id=mission_id,
            xp=xp,
            shells=shells,
        )

    return _make


@pytest.fixture
def progression() -> ProgressionState:
    return ProgressionState()


@pytest.fixture
def yesterday() -> date:
    return TODAY - timedelta(days=1)

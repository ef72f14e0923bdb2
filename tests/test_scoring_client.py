"""Tests for the HTTP scoring client against a local aiohttp server."""

import asyncio
import json

import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from swell.core.models import ScoreRequest
from swell.exceptions import MalformedScorerResponse, ScorerUnavailable
from swell.services.scoring_client import ScoringClient, parse_score_body

REQUEST = ScoreRequest(
    mission_text="Send one honest check-in to someone who matters.",
    reflection="Messaged my brother about his exam",
    current_xp=120,
    streak=3,
    tier="core",
)


class FakeScorer:
    """What the fake endpoint replies with, and what it received."""

    def __init__(self):
        self.status = 200
        self.body = json.dumps({"xp": 38, "note": "Real check-in."})
        self.delay = 0.0
        self.received: list[dict] = []

    async def handle(self, request: web.Request) -> web.Response:
        self.received.append(await request.json())
        if self.delay:
            await asyncio.sleep(self.delay)
        return web.Response(status=self.status, text=self.body, content_type="application/json")


@pytest_asyncio.fixture
async def scorer_server():
    fake = FakeScorer()
    app = web.Application()
    app.router.add_post("/score-mission", fake.handle)
    server = test_utils.TestServer(app)
    await server.start_server()
    yield fake, str(server.make_url("/score-mission"))
    await server.close()


@pytest.mark.asyncio
async def test_score_success(scorer_server):
    fake, url = scorer_server

    result = await ScoringClient(url=url, timeout=5).score(REQUEST)

    assert result.xp == 38
    assert result.note == "Real check-in."
    assert fake.received == [
        {
            "missionText": REQUEST.mission_text,
            "reflection": REQUEST.reflection,
            "currentXp": 120,
            "streak": 3,
            "tier": "core",
        }
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 500, 502])
async def test_non_success_status_is_unavailable(scorer_server, status):
    fake, url = scorer_server
    fake.status = status
    fake.body = json.dumps({"detail": "model request failed"})

    with pytest.raises(ScorerUnavailable) as exc_info:
        await ScoringClient(url=url, timeout=5).score(REQUEST)

    assert exc_info.value.status == status
    assert len(fake.received) == 1


@pytest.mark.asyncio
async def test_timeout_is_unavailable(scorer_server):
    fake, url = scorer_server
    fake.delay = 1.0

    with pytest.raises(ScorerUnavailable):
        await ScoringClient(url=url, timeout=0.1).score(REQUEST)


@pytest.mark.asyncio
async def test_connection_refused_is_unavailable():
    with pytest.raises(ScorerUnavailable):
        await ScoringClient(url="http://127.0.0.1:1/score-mission", timeout=2).score(REQUEST)


@pytest.mark.asyncio
async def test_garbage_body_is_malformed(scorer_server):
    fake, url = scorer_server
    fake.body = "<html>oops</html>"

    with pytest.raises(MalformedScorerResponse) as exc_info:
        await ScoringClient(url=url, timeout=5).score(REQUEST)

    assert exc_info.value.raw == "<html>oops</html>"


def test_parse_score_body_requires_numeric_xp():
    with pytest.raises(MalformedScorerResponse):
        parse_score_body('{"xp": "forty", "note": "hm"}')
    with pytest.raises(MalformedScorerResponse):
        parse_score_body('{"note": "no xp"}')
    with pytest.raises(MalformedScorerResponse):
        parse_score_body('{"xp": true}')
    with pytest.raises(MalformedScorerResponse):
        parse_score_body("[38]")


def test_parse_score_body_defaults_note():
    result = parse_score_body('{"xp": 27.5}')

    assert result.xp == 27.5
    assert result.note == "Nice rep. Keep going."

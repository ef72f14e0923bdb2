"""Tests for the LLM scoring wrapper."""

from unittest.mock import AsyncMock, patch

import pytest

from swell.core.models import ScoreRequest
from swell.exceptions import ScorerUnavailable
from swell.services.ai import SCORING_SYSTEM_PROMPT, AIService, parse_scoring_reply

REQUEST = ScoreRequest(
    mission_text="Take 3 slow breaths before a moment that usually spikes you.",
    reflection="Breathed three times before standup, felt calmer",
    current_xp=60,
    streak=2,
    tier="easy",
)


def test_parse_plain_json():
    result = parse_scoring_reply('{"xp": 31, "note": "Calm and concrete."}')

    assert result.xp == 31
    assert result.note == "Calm and concrete."


def test_parse_fenced_json():
    result = parse_scoring_reply('```json\n{"xp": 44, "note": "Strong."}\n```')

    assert result.xp == 44
    assert result.note == "Strong."


def test_parse_json_with_chatter():
    result = parse_scoring_reply('Sure! Here you go: {"xp": 18, "note": "Small start."} Hope it helps')

    assert result.xp == 18


@pytest.mark.parametrize("content", ["", "I think 40", '{"xp": "high"}', "[1, 2]", None])
def test_parse_garbage_falls_back_to_defaults(content):
    result = parse_scoring_reply(content)

    assert result.xp == 20
    assert result.note == "Nice rep. Keep going."


def test_rubric_prompt_bands():
    for band in ("10-14", "15-25", "26-40", "41-50", "51-60"):
        assert band in SCORING_SYSTEM_PROMPT
    assert "never give more than 20 XP" in SCORING_SYSTEM_PROMPT


@pytest.mark.asyncio
async def test_score_reflection_builds_prompt():
    service = AIService()
    with patch.object(
        service, "_make_request", AsyncMock(return_value='{"xp": 27, "note": "Good."}')
    ) as mock_request:
        result = await service.score_reflection(REQUEST)

    assert result.xp == 27
    messages = mock_request.call_args[0][0]
    assert messages[0] == {"role": "system", "content": SCORING_SYSTEM_PROMPT}
    user_prompt = messages[1]["content"]
    assert REQUEST.mission_text in user_prompt
    assert REQUEST.reflection in user_prompt
    assert 'Tier: "easy"' in user_prompt
    assert "Current XP: 60" in user_prompt
    assert "Streak: 2" in user_prompt


@pytest.mark.asyncio
async def test_score_reflection_transport_failure():
    service = AIService()
    with patch.object(
        service, "_make_request", AsyncMock(side_effect=ConnectionError("refused"))
    ):
        with pytest.raises(ScorerUnavailable):
            await service.score_reflection(REQUEST)

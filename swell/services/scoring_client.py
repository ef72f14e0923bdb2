"""
Scoring Client - JSON-over-HTTP client for the /score-mission endpoint.

AICODE-NOTE: Exactly one POST per claim, no retry. A retry racing a slow
success could grant the same reward twice. Failures are raised as
ScorerUnavailable / MalformedScorerResponse and recovered by the reward
use-case, never here.
"""

import asyncio
import json
import logging
from typing import Protocol

import aiohttp

from swell.config import config
from swell.core.domain.reward_rules import DEFAULT_NOTE, coerce_score
from swell.core.models import ScoreRequest, ScoreResult
from swell.exceptions import MalformedScorerResponse, ScorerUnavailable

logger = logging.getLogger(__name__)


class MissionScorer(Protocol):
    """Anything that can score a reflection."""

    async def score(self, request: ScoreRequest) -> ScoreResult: ...


def parse_score_body(body: str) -> ScoreResult:
    """
    Parse a scorer reply into ScoreResult.

    Raises:
        MalformedScorerResponse: body is not a JSON object or xp is not a number
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedScorerResponse(f"Scorer reply is not JSON: {e}", raw=body) from e

    if not isinstance(data, dict):
        raise MalformedScorerResponse("Scorer reply is not an object", raw=body)

    xp = coerce_score(data.get("xp"))
    if xp is None:
        raise MalformedScorerResponse("Scorer reply has no numeric xp", raw=body)

    note = data.get("note")
    if not isinstance(note, str) or not note.strip():
        note = DEFAULT_NOTE

    return ScoreResult(xp=xp, note=note)


class ScoringClient:
    """HTTP scorer used by the reward pipeline."""

    def __init__(self, url: str | None = None, timeout: float | None = None):
        self.url = url or config.SCORING_URL
        self.timeout = timeout if timeout is not None else config.SCORING_TIMEOUT

    async def score(self, request: ScoreRequest) -> ScoreResult:
        """
        Send one scoring request.

        Args:
            request: Mission text, reflection, current XP, streak and tier

        Returns:
            ScoreResult with the raw rubric score (no bonus, no clamp)

        Raises:
            ScorerUnavailable: connection error, timeout or non-2xx status
            MalformedScorerResponse: reply body cannot be parsed
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.url, json=request.to_payload()) as response:
                    body = await response.text()
                    if not 200 <= response.status < 300:
                        logger.error(
                            f"Scorer returned {response.status}: {body[:200]}"
                        )
                        raise ScorerUnavailable(
                            f"Scorer returned status {response.status}",
                            status=response.status,
                        )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Scorer request to {self.url} failed: {e!r}")
            raise ScorerUnavailable(f"Scorer request failed: {e!r}") from e

        return parse_score_body(body)

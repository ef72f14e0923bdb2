"""
AI Service - LLM wrapper behind the /score-mission endpoint.
Scores a mission reflection for effort and specificity.

AICODE-NOTE: Provider is chosen by config.AI_PROVIDER:
- "openai" (default): any OpenAI-compatible server, a local Ollama by default
- "anthropic": Claude
Transport errors are retried here with tenacity. The client pipeline still
sends a single request per claim to the endpoint.
"""

import json
import logging
import re
import time
from typing import Any

from anthropic import (
    APIConnectionError as AnthropicAPIConnectionError,
)
from anthropic import (
    APIError as AnthropicAPIError,
)
from anthropic import (
    AsyncAnthropic,
)
from anthropic import (
    RateLimitError as AnthropicRateLimitError,
)
from openai import APIConnectionError, APIError, AsyncOpenAI, RateLimitError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from swell.config import config
from swell.core.domain.reward_rules import DEFAULT_NOTE, DEFAULT_SCORE_XP, coerce_score
from swell.core.models import ScoreRequest, ScoreResult
from swell.exceptions import ScorerUnavailable

logger = logging.getLogger(__name__)


# === PROMPTS ===

SCORING_SYSTEM_PROMPT = """You are Riff, a calm Swell coach.

You read:
- the mission text
- a short reflection of what the person actually did

Assign XP from 10 to 60 based ONLY on effort and specificity.

Rubric:
- 10-14: they did not do it, or the answer is "no", "nothing" or stalling.
- 15-25: tiny or vague effort, not very specific.
- 26-40: clear, concrete real action that matches the mission.
- 41-50: strong follow-through with impact or thoughtfulness.
- 51-60: high-friction, vulnerable or very meaningful behavior.

Stretch missions can lean slightly higher, easy missions slightly lower,
but never give more than 20 XP if they admit they did nothing.

Return ONLY valid JSON (no markdown, no ```):
{"xp": number, "note": "one short kind sentence"}"""

SCORING_USER_PROMPT = """Mission: "{mission_text}"
Tier: "{tier}"
Reflection: "{reflection}"
Current XP: {current_xp}
Streak: {streak}"""

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def parse_scoring_reply(content: str) -> ScoreResult:
    """
    Extract {xp, note} from LLM output.

    Strips markdown fences and surrounding chatter. Anything unusable falls
    back to DEFAULT_SCORE_XP / DEFAULT_NOTE per field.
    """
    text = (content or "").strip()
    if text.startswith("```"):
        text = text.split("```")[1].strip()
        if text.startswith("json"):
            text = text[4:].strip()

    parsed: Any = {}
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        match = _JSON_OBJECT.search(text)
        if match:
            try:
                parsed = json.loads(match.group(0))
            except json.JSONDecodeError:
                parsed = {}
    if not isinstance(parsed, dict):
        parsed = {}

    xp = coerce_score(parsed.get("xp"))
    if xp is None:
        logger.error(f"Failed to parse scoring reply: {content!r}")
        xp = float(DEFAULT_SCORE_XP)

    note = parsed.get("note")
    if not isinstance(note, str) or not note.strip():
        note = DEFAULT_NOTE

    return ScoreResult(xp=xp, note=note)


class AIService:
    def __init__(self):
        """
        Build the LLM client for config.AI_PROVIDER.

        AICODE-NOTE: Local OpenAI-compatible servers (Ollama) ignore the key,
        but the SDK requires one, so a placeholder is used when a base URL
        is configured.
        """
        self.provider = config.AI_PROVIDER.lower()

        if self.provider == "anthropic":
            if not config.ANTHROPIC_KEY:
                raise ValueError("ANTHROPIC_KEY required for AI_PROVIDER=anthropic")
            self.client = AsyncAnthropic(
                api_key=config.ANTHROPIC_KEY.get_secret_value(),
                timeout=config.AI_TIMEOUT,
            )
            self.model = config.ANTHROPIC_MODEL
        else:
            if config.OPENAI_KEY:
                api_key = config.OPENAI_KEY.get_secret_value()
            elif config.OPENAI_BASE_URL:
                api_key = "ollama"
            else:
                raise ValueError("OPENAI_KEY or OPENAI_BASE_URL required for AI_PROVIDER=openai")
            self.client = AsyncOpenAI(
                api_key=api_key,
                base_url=config.OPENAI_BASE_URL or None,
                timeout=config.AI_TIMEOUT,
            )
            self.model = config.OPENAI_MODEL
            self.provider = "openai"

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(
            (
                APIConnectionError,
                RateLimitError,
                AnthropicAPIConnectionError,
                AnthropicRateLimitError,
                ConnectionError,
            )
        ),
        reraise=True,
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
    async def _make_request(self, messages: list[dict[str, Any]], **kwargs) -> str:
        """
        Send one chat request with retries.

        AICODE-NOTE: Claude takes the system prompt separately and requires
        max_tokens.
        """
        start_time = time.time()
        try:
            if self.provider == "anthropic":
                max_tokens = kwargs.pop("max_tokens", 256)
                system_content = ""
                user_messages = []
                for msg in messages:
                    if msg["role"] == "system":
                        system_content = msg["content"]
                    else:
                        user_messages.append(msg)

                response = await self.client.messages.create(
                    model=self.model,
                    max_tokens=max_tokens,
                    system=system_content,
                    messages=user_messages,
                    **kwargs,
                )
                latency = time.time() - start_time
                logger.info(f"Claude Request OK. Latency: {latency:.2f}s")
                return response.content[0].text
            else:
                response = await self.client.chat.completions.create(
                    model=self.model, messages=messages, **kwargs
                )
                latency = time.time() - start_time
                logger.info(f"OpenAI Request OK. Latency: {latency:.2f}s")
                return response.choices[0].message.content or ""
        except Exception as e:
            logger.error(f"AI Request failed ({self.provider}): {e}")
            raise

    async def score_reflection(self, request: ScoreRequest) -> ScoreResult:
        """
        Score a reflection against the rubric.

        Args:
            request: Mission text, tier, reflection, current XP and streak

        Returns:
            ScoreResult with the raw rubric score (defaults on a bad reply)

        Raises:
            ScorerUnavailable: the model could not be reached after retries
        """
        prompt = SCORING_USER_PROMPT.format(
            mission_text=request.mission_text,
            tier=request.tier or "unknown",
            reflection=request.reflection or "",
            current_xp=request.current_xp or 0,
            streak=request.streak or 0,
        )
        messages = [
            {"role": "system", "content": SCORING_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]
        try:
            content = await self._make_request(messages, temperature=0.2)
        except (APIError, AnthropicAPIError, ConnectionError) as e:
            raise ScorerUnavailable(f"Model request failed: {e}") from e

        return parse_scoring_reply(content)


ai_service = AIService()

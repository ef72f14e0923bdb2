"""
Content Generation Domain Rules - deterministic daily prompt and missions.

AICODE-NOTE: Pure functions without I/O, randomness or wall-clock access.
The same day always yields the same prompt and missions. Selection goes
through stable_hash(), which reproduces a 32-bit signed accumulation
explicitly so results do not depend on platform integer behaviour.

Policy: unified daily stack. Every day mixes one relationships, one stress
and one performance rep regardless of focus; focus is still validated and
recorded on entries for history.
"""

from datetime import date

from swell.core.models import FOCUSES, DailyContent, Focus, Mission, Tier

PROMPTS: tuple[str, ...] = (
    "Pick one real moment today and try a softer, clearer version of yourself.",
    "Choose one stress spike you expect and decide how you want to handle it.",
    "Give one person a reply you will be proud of later.",
    "Protect one block of focus for work that actually matters to you.",
    "Name one thing that is in your control and act on it.",
    "Turn one defensive instinct into a curious question.",
)

RELATIONSHIP_MISSIONS: tuple[str, ...] = (
    "Send one honest check-in to someone who matters.",
    "In one hard moment, listen fully before you answer.",
    "Thank someone directly for something you usually overlook.",
)

STRESS_MISSIONS: tuple[str, ...] = (
    "Take 3 slow breaths before a moment that usually spikes you.",
    "Step away from your screen for 60 seconds when you feel flooded.",
    "Name the top stressor out loud and choose one next step.",
)

PERFORMANCE_MISSIONS: tuple[str, ...] = (
    "Give your most important task five extra minutes of clean focus.",
    "Clarify success for one task in a single sentence before you start.",
    "Ask one direct question that removes uncertainty at work.",
)

# (pool, offset, tier, xp, shells, requires_reflection)
MISSION_SLOTS: tuple[tuple[tuple[str, ...], int, Tier, int, int, bool], ...] = (
    (RELATIONSHIP_MISSIONS, 1, "core", 18, 2, True),
    (STRESS_MISSIONS, 7, "easy", 10, 1, False),
    (PERFORMANCE_MISSIONS, 13, "stretch", 24, 3, True),
)

PROMPT_SALT = "unified"

TIER_LABELS: dict[str, str] = {
    "easy": "Low friction",
    "core": "Core rep",
    "stretch": "Stretch",
}

FOCUS_LABELS: dict[str, str] = {
    "relationships": "Relationships",
    "stress": "Stress",
    "performance": "Performance",
}

_INT32 = 1 << 32
_INT32_SIGN = 1 << 31


def stable_hash(text: str) -> int:
    """
    Hash a string to a non-negative int, identically on every platform.

    h = (h * 31 + code_unit) mod 2**32, read back as signed 32-bit,
    then absolute value. Iterates UTF-16 code units.

    Args:
        text: Any string (usually an ISO date)

    Returns:
        Non-negative integer in [0, 2**31]
    """
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + code_unit) % _INT32
    if h >= _INT32_SIGN:
        h -= _INT32
    return abs(h)


def _check_focus(focus: str) -> None:
    if focus not in FOCUSES:
        raise ValueError(f"Unknown focus: {focus!r}")


def generate_daily_prompt(day: date, focus: Focus) -> str:
    """Today's reflection prompt."""
    _check_focus(focus)
    index = stable_hash(day.isoformat() + PROMPT_SALT) % len(PROMPTS)
    return PROMPTS[index]


def get_daily_missions(day: date, focus: Focus) -> list[Mission]:
    """
    Build the three missions for a day.

    Order is core, easy, stretch. Mission ids are
    "<date>-<tier>-<offset>", stable and unique within the day.

    Args:
        day: Calendar day
        focus: User focus (validated, does not change content)

    Returns:
        Exactly three missions
    """
    _check_focus(focus)
    return _missions_for(day)


def _missions_for(day: date) -> list[Mission]:
    day_id = day.isoformat()
    base = stable_hash(day_id)

    missions = []
    for pool, offset, tier, xp, shells, requires_reflection in MISSION_SLOTS:
        label = pool[(base + offset) % len(pool)]
        missions.append(
            Mission(
                id=f"{day_id}-{tier}-{offset}",
                label=label,
                xp=xp,
                tier=tier,
                reward_shells=shells,
                requires_reflection=requires_reflection,
            )
        )
    return missions


def generate_daily(day: date, focus: Focus) -> DailyContent:
    """Prompt and missions for a day in one call."""
    return DailyContent(
        prompt=generate_daily_prompt(day, focus),
        missions=get_daily_missions(day, focus),
    )


def find_mission(day: date, mission_id: str) -> Mission | None:
    """Look up one of the day's missions by id."""
    for mission in _missions_for(day):
        if mission.id == mission_id:
            return mission
    return None


def tier_label(tier: str) -> str:
    return TIER_LABELS.get(tier, "Stretch")


def focus_label(focus: str) -> str:
    return FOCUS_LABELS.get(focus, "Performance")

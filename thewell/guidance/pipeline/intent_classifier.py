from __future__ import annotations

import re
from typing import Optional, Sequence, TypeVar

from ..intents import LightIntent, StaticIntent

IntentT = TypeVar("IntentT", StaticIntent, LightIntent)

# Shared by both rule chains. Must stay the first rule in each of them.
CRISIS_PATTERN = re.compile(
    r"(suicide|kill myself|self[-\s]?harm|harm myself|overdose|i want to die"
    r"|end my life|no reason to live|abuse|in danger)",
    re.IGNORECASE,
)


STATIC_RULES: tuple[tuple[re.Pattern[str], StaticIntent], ...] = (
    (CRISIS_PATTERN, StaticIntent.CRISIS),
    (
        re.compile(
            r"(assurance|am\s+i\s+(really\s+)?saved|lose\s+my\s+salvation"
            r"|doubt\s+my\s+(faith|salvation)|eternal\s+security|salvation)"
        ),
        StaticIntent.ASSURANCE,
    ),
    (re.compile(r"(pray|prayer)"), StaticIntent.PRAYER),
    (re.compile(r"(anxious|anxiety|worry|worried|panic|fear|stress)"), StaticIntent.ANXIETY),
    (re.compile(r"(lust|porn|purity|temptation|sexual)"), StaticIntent.PURITY),
    (
        re.compile(r"(suffer|grief|grieving|pain|loss|cancer|why\s+did\s+god\s+allow)"),
        StaticIntent.SUFFERING,
    ),
)


LIGHT_RULES: tuple[tuple[re.Pattern[str], LightIntent], ...] = (
    (CRISIS_PATTERN, LightIntent.CRISIS),
    (
        re.compile(r"(did\s*jesus\s*rise|resurrection|minimal\s*facts|empty\s*tomb|habermas)"),
        LightIntent.RESURRECTION,
    ),
    (
        re.compile(
            r"(why\s+believe\s+(in\s+)?god|does\s+god\s+exist|fine[-\s]?tuning"
            r"|moral\s+law|first\s*cause|atheis|agnosti)"
        ),
        LightIntent.EXISTENCE,
    ),
    (re.compile(r"(problem\s+of\s+evil|suffering|why\s+bad\s+things)"), LightIntent.EVIL),
    (
        re.compile(
            r"(bible|scripture).*(reliable|canon|manuscript|inerrant|inspiration|contradiction)"
        ),
        LightIntent.BIBLIOLOGY,
    ),
    (re.compile(r"(trinity|triune|three\s*in\s*one|godhead)"), LightIntent.TRINITY),
    (
        re.compile(r"(who\s*is\s*jesus|is\s*jesus\s*god|incarnation|deity\s*of\s*christ)"),
        LightIntent.CHRISTOLOGY,
    ),
    (
        re.compile(r"(salvation|saved|assurance|born again|eternal life)"),
        LightIntent.SOTERIOLOGY,
    ),
)


def _first_match(
    query: Optional[str],
    rules: Sequence[tuple[re.Pattern[str], IntentT]],
    default: IntentT,
) -> IntentT:
    """First matching rule wins; rule order is the priority order."""
    text = (query or "").lower()
    for pattern, intent in rules:
        if pattern.search(text):
            return intent
    return default


def is_crisis(query: Optional[str]) -> bool:
    return bool(CRISIS_PATTERN.search(query or ""))


def classify_static(query: Optional[str]) -> StaticIntent:
    return _first_match(query, STATIC_RULES, StaticIntent.GENERAL)


def classify_light(query: Optional[str]) -> LightIntent:
    """Analytics tag for LLM mode. The model, not this tag, shapes the answer."""
    return _first_match(query, LIGHT_RULES, LightIntent.GENERAL)

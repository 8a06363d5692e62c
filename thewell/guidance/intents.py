from __future__ import annotations

from enum import Enum


class StaticIntent(str, Enum):
    """Intents that select a hand-authored content block (static mode)."""

    CRISIS = "crisis"
    ASSURANCE = "assurance"
    PRAYER = "prayer"
    ANXIETY = "anxiety"
    PURITY = "purity"
    SUFFERING = "suffering"
    GENERAL = "general"


class LightIntent(str, Enum):
    """UI/analytics tag in LLM mode. Never used to branch response content."""

    CRISIS = "crisis"
    RESURRECTION = "resurrection"
    EXISTENCE = "existence"
    EVIL = "evil"
    BIBLIOLOGY = "bibliology"
    TRINITY = "trinity"
    CHRISTOLOGY = "christology"
    SOTERIOLOGY = "soteriology"
    GENERAL = "general"

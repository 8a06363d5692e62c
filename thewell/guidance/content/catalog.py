from __future__ import annotations

from dataclasses import dataclass

from ..intents import StaticIntent


@dataclass(frozen=True)
class CatalogEntry:
    resource_id: str
    title: str
    author: str
    topics: frozenset[str]


# Declaration order is the selection order. Entry 0 is the default recommendation.
APPROVED_RESOURCE_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        resource_id="gentle-and-lowly",
        title="Gentle and Lowly",
        author="Dane Ortlund",
        topics=frozenset({"general", "grace"}),
    ),
    CatalogEntry(
        resource_id="assured",
        title="Assured: Discover Grace, Let Go of Guilt, and Rest in Your Salvation",
        author="Benjamin Vincent",
        topics=frozenset({"assurance", "salvation", "doubt"}),
    ),
    CatalogEntry(
        resource_id="prayer-keller",
        title="Prayer: Experiencing Awe and Intimacy with God",
        author="Timothy Keller",
        topics=frozenset({"prayer", "devotion"}),
    ),
    CatalogEntry(
        resource_id="running-scared",
        title="Running Scared: Fear, Worry, and the God of Rest",
        author="Edward T. Welch",
        topics=frozenset({"anxiety", "fear", "worry"}),
    ),
    CatalogEntry(
        resource_id="sexual-detox",
        title="Sexual Detox",
        author="Tim Challies",
        topics=frozenset({"purity", "temptation"}),
    ),
    CatalogEntry(
        resource_id="walking-with-god-through-pain",
        title="Walking with God through Pain and Suffering",
        author="Timothy Keller",
        topics=frozenset({"suffering", "grief"}),
    ),
    CatalogEntry(
        resource_id="dark-clouds-deep-mercy",
        title="Dark Clouds, Deep Mercy: Discovering the Grace of Lament",
        author="Mark Vroegop",
        topics=frozenset({"lament", "grief", "care"}),
    ),
)


# Ordered topic preferences per intent. Matching walks the catalog, not this tuple.
INTENT_TOPICS: dict[StaticIntent, tuple[str, ...]] = {
    StaticIntent.CRISIS: ("care", "lament"),
    StaticIntent.ASSURANCE: ("assurance", "salvation"),
    StaticIntent.PRAYER: ("prayer",),
    StaticIntent.ANXIETY: ("anxiety", "worry"),
    StaticIntent.PURITY: ("purity", "temptation"),
    StaticIntent.SUFFERING: ("suffering", "grief"),
    StaticIntent.GENERAL: ("general",),
}

from __future__ import annotations

from ..content import APPROVED_RESOURCE_CATALOG, INTENT_TOPICS, CatalogEntry
from ..intents import StaticIntent


def recommend_resource(intent: StaticIntent) -> CatalogEntry:
    """Return the first catalog entry whose topics overlap the intent's topics.

    Falls back to the first catalog entry. The catalog is a non-empty constant,
    so this never returns ``None``.
    """
    wanted = set(INTENT_TOPICS.get(intent, ()))
    for entry in APPROVED_RESOURCE_CATALOG:
        if entry.topics & wanted:
            return entry
    return APPROVED_RESOURCE_CATALOG[0]

from .catalog import APPROVED_RESOURCE_CATALOG, INTENT_TOPICS, CatalogEntry
from .blocks import (
    CRISIS_BLOCK,
    CRISIS_MESSAGE,
    DEFAULT_DISCLAIMER,
    INTENT_BLOCKS,
    MISSING_CREDENTIAL_RESPONSE,
    MISSING_CREDENTIAL_SCRIPTURE,
    ContentBlock,
)

__all__ = [
    "APPROVED_RESOURCE_CATALOG",
    "INTENT_TOPICS",
    "CatalogEntry",
    "CRISIS_BLOCK",
    "CRISIS_MESSAGE",
    "DEFAULT_DISCLAIMER",
    "INTENT_BLOCKS",
    "MISSING_CREDENTIAL_RESPONSE",
    "MISSING_CREDENTIAL_SCRIPTURE",
    "ContentBlock",
]

from __future__ import annotations

from ..content import (
    CRISIS_BLOCK,
    CRISIS_MESSAGE,
    DEFAULT_DISCLAIMER,
    INTENT_BLOCKS,
    ContentBlock,
)
from ..intents import StaticIntent
from ..schemas import Escalation, GuidancePayload, ResourceRecommendation
from .resource_recommender import recommend_resource


def crisis_escalation() -> Escalation:
    return Escalation(type="crisis", message=CRISIS_MESSAGE, contact_required=True)


def build_static_payload(intent: StaticIntent) -> GuidancePayload:
    """Assemble the hand-authored answer for ``intent``. Pure lookup, no failure modes."""
    if intent is StaticIntent.CRISIS:
        block: ContentBlock = CRISIS_BLOCK
        escalation = crisis_escalation()
    else:
        block = INTENT_BLOCKS.get(intent, INTENT_BLOCKS[StaticIntent.GENERAL])
        escalation = Escalation(type="none")

    resource = recommend_resource(intent)
    return GuidancePayload(
        response=block.response,
        explanation=block.explanation,
        scripture_pathway=list(block.scripture),
        recommendation=ResourceRecommendation(
            resource_id=resource.resource_id,
            title=resource.title,
            author=resource.author,
        ),
        next_steps=list(block.next_steps),
        reflection_prayer=block.reflection_prayer,
        follow_up_question=block.follow_up_question,
        intent=intent.value,
        escalation=escalation,
        disclaimer=DEFAULT_DISCLAIMER,
    )

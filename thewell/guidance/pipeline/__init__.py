from .intent_classifier import (
    CRISIS_PATTERN,
    LIGHT_RULES,
    STATIC_RULES,
    classify_light,
    classify_static,
    is_crisis,
)
from .resource_recommender import recommend_resource
from .static_builder import build_static_payload, crisis_escalation
from .prompt_assembler import MODE_FORMATS, SCHEMA_PROMPT, PromptSet, assemble_prompt
from .response_parser import (
    Fallback,
    Parsed,
    ParseResult,
    augment_payload,
    fallback_payload,
    parse_model_output,
    payload_from_result,
)

__all__ = [
    "CRISIS_PATTERN",
    "LIGHT_RULES",
    "STATIC_RULES",
    "classify_light",
    "classify_static",
    "is_crisis",
    "recommend_resource",
    "build_static_payload",
    "crisis_escalation",
    "MODE_FORMATS",
    "SCHEMA_PROMPT",
    "PromptSet",
    "assemble_prompt",
    "Fallback",
    "Parsed",
    "ParseResult",
    "augment_payload",
    "fallback_payload",
    "parse_model_output",
    "payload_from_result",
]

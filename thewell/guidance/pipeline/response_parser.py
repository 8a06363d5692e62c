from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from ..content import DEFAULT_DISCLAIMER
from .static_builder import crisis_escalation


@dataclass(frozen=True)
class Parsed:
    payload: dict[str, Any]


@dataclass(frozen=True)
class Fallback:
    raw_text: str


ParseResult = Union[Parsed, Fallback]


def _reject_constant(name: str) -> Any:
    # NaN/Infinity are not JSON and cannot be re-serialized in the response.
    raise ValueError(f"non-standard JSON constant {name}")


def parse_model_output(raw_text: str) -> ParseResult:
    """Strict JSON parse of the model's reply.

    Only a top-level JSON object counts as parsed. Anything else, including
    fenced or truncated JSON, comes back as ``Fallback``. Never raises.
    """
    try:
        decoded = json.loads(raw_text, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError):
        return Fallback(raw_text=raw_text if isinstance(raw_text, str) else "")
    if not isinstance(decoded, dict):
        return Fallback(raw_text=raw_text)
    return Parsed(payload=decoded)


def fallback_payload(raw_text: str, intent: str) -> dict[str, Any]:
    return {
        "response": raw_text,
        "explanation": None,
        "scripture_pathway": [],
        "recommendation": None,
        "next_steps": [],
        "reflection_prayer": None,
        "follow_up_question": None,
        "intent": intent,
    }


def payload_from_result(result: ParseResult, intent: str) -> dict[str, Any]:
    if isinstance(result, Parsed):
        return result.payload
    return fallback_payload(result.raw_text, intent)


def _is_plain_escalation(value: Any) -> bool:
    return isinstance(value, dict) and value.get("type") == "none"


def augment_payload(payload: dict[str, Any], *, crisis: bool, intent: str) -> dict[str, Any]:
    """Apply the safety fields to a base payload and return a new dict.

    Crisis escalation comes from the classifier's verdict on the original
    query. Whatever the model put in ``escalation`` is overwritten in that case,
    and a model-claimed crisis on a non-crisis query is reset to ``none``.
    """
    out = dict(payload)
    if crisis:
        out["escalation"] = crisis_escalation().model_dump()
    elif not _is_plain_escalation(out.get("escalation")):
        out["escalation"] = {"type": "none"}
    if not out.get("disclaimer"):
        out["disclaimer"] = DEFAULT_DISCLAIMER
    out.setdefault("intent", intent)
    return out

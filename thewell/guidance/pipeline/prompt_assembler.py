from __future__ import annotations

from dataclasses import dataclass

from ...config import GuidanceDefaults
from ..schemas import GuidanceRequest


SCHEMA_PROMPT = """
Return ONLY JSON matching this schema:
{
  "response": string,                // main answer body
  "explanation": string|null,        // optional deeper dive
  "scripture_pathway": [             // list of passages used
    { "ref": string, "quote": string|null, "why": string|null,
      "translation": "ESV"|"CSB"|"NIV"|"NKJV" }
  ],
  "next_steps": string[],            // practical actions
  "reflection_prayer": string|null,  // short prayer (optional)
  "follow_up_question": string|null, // one inviting next question
  "intent": string                   // server-detected or model-assigned
}
Do not include markdown fences or extra text—JSON only.
"""

# Response shape per client mode. Unknown modes get no extra shape rule.
MODE_FORMATS: dict[str, str] = {
    "/ask": "≤120 words + one verse.",
    "/study": "context → meaning → application → prayer.",
    "/pray": "2–5 sentence Christ-centered prayer.",
    "/plan": "7-day plan with passages + prompts.",
    "/debate": "present biblical case, summarize opposing view fairly, respond charitably.",
    "/share": "4-slide caption (hook, scripture, insight, next step).",
}


@dataclass(frozen=True)
class PromptSet:
    system: str
    developer: str
    user: str

    def to_messages(self) -> list[dict[str, str]]:
        # The developer preamble travels as a second system message.
        return [
            {"role": "system", "content": self.system},
            {"role": "system", "content": self.developer},
            {"role": "user", "content": self.user},
        ]


def assemble_constraints(request: GuidanceRequest, *, defaults: GuidanceDefaults) -> str:
    cfg = request.constraints
    translation_order = " → ".join(cfg.translation_order or defaults.translation_order)
    xref_limit = cfg.xref_limit or defaults.xref_limit
    max_quote_words = cfg.max_quote_words or defaults.max_quote_words
    mode_lines = "\n".join(f"  {mode} → {shape}" for mode, shape in MODE_FORMATS.items())
    return (
        f"\n- Quote from {translation_order}. Keep direct quotes ≤ {max_quote_words} words.\n"
        f"- Use ≤ {xref_limit} cross-references unless the user requested /study.\n"
        f"- Format per mode:\n"
        f"{mode_lines}\n"
    )


def assemble_user_prompt(request: GuidanceRequest, *, defaults: GuidanceDefaults) -> str:
    return "\n".join(
        [
            f"Question: {request.query}",
            f"Mode: {request.mode or 'none'}",
            f"Depth: {request.depth or defaults.depth}",
            assemble_constraints(request, defaults=defaults),
            SCHEMA_PROMPT,
        ]
    )


def assemble_prompt(request: GuidanceRequest, *, defaults: GuidanceDefaults) -> PromptSet:
    """Build the three-part instruction set. Preambles pass through verbatim."""
    return PromptSet(
        system=request.prompts.system,
        developer=request.prompts.developer,
        user=assemble_user_prompt(request, defaults=defaults),
    )

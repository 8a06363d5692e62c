"""Wire models for the guidance endpoint.

Field names are snake_case on the wire. The main answer is always ``response``.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Translation = Literal["ESV", "CSB", "NIV", "NKJV"]
EscalationType = Literal["crisis", "none"]


# ─── Output contract ───────────────────────────────────────────────────
class ScripturePathwayEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    ref: str
    quote: Optional[str] = None
    why: Optional[str] = None
    translation: Translation = "ESV"


class ResourceRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    resource_id: str
    title: str
    author: str


class Escalation(BaseModel):
    type: EscalationType = "none"
    message: Optional[str] = None
    contact_required: Optional[bool] = None


class GuidancePayload(BaseModel):
    response: str
    explanation: Optional[str] = None
    scripture_pathway: List[ScripturePathwayEntry] = Field(default_factory=list)
    recommendation: Optional[ResourceRecommendation] = None
    next_steps: List[str] = Field(default_factory=list)
    reflection_prayer: Optional[str] = None
    follow_up_question: Optional[str] = None
    intent: str
    escalation: Escalation = Field(default_factory=Escalation)
    disclaimer: str = Field(min_length=1)


# ─── Request contract ──────────────────────────────────────────────────
def _optional_positive_int(value: Any) -> Optional[int]:
    # Zero, empty and non-numeric values fall back to the deployment default.
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
    return number or None


class PromptOverrides(BaseModel):
    """Caller-supplied preambles, passed to the model verbatim."""

    model_config = ConfigDict(extra="ignore")

    system: str = ""
    developer: str = ""

    @field_validator("system", "developer", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        return str(value) if value else ""


class ConstraintConfig(BaseModel):
    """Advisory prompt constraints. Only embedded in the prompt, never enforced."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    translation_order: Optional[List[str]] = Field(default=None, alias="translationOrder")
    xref_limit: Optional[int] = Field(default=None, alias="xrefLimit")
    max_quote_words: Optional[int] = Field(default=None, alias="maxQuoteWords")

    @field_validator("translation_order", mode="before")
    @classmethod
    def _list_or_none(cls, value: Any) -> Optional[List[str]]:
        if not isinstance(value, list):
            return None
        return [str(v) for v in value]

    @field_validator("xref_limit", "max_quote_words", mode="before")
    @classmethod
    def _number_or_none(cls, value: Any) -> Optional[int]:
        return _optional_positive_int(value)


class GuidanceRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    query: str = Field(min_length=1)
    mode: Optional[str] = None
    depth: Optional[str] = None
    prompts: PromptOverrides = Field(default_factory=PromptOverrides)
    constraints: ConstraintConfig = Field(default_factory=ConstraintConfig, alias="config")

    @field_validator("mode", "depth", mode="before")
    @classmethod
    def _optional_str(cls, value: Any) -> Optional[str]:
        return str(value) if value else None

    @field_validator("prompts", "constraints", mode="before")
    @classmethod
    def _object_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}


# ─── Operational responses ─────────────────────────────────────────────
class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    status: Literal["ok"]
    service: str


class ReadyResponse(BaseModel):
    status: Literal["ok", "degraded"]
    mode: str
    model: Optional[str] = None
    credential_configured: bool

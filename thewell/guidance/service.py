from __future__ import annotations

from typing import Any, Optional, Protocol

from ..config import AppSettings, GuidanceDefaults
from ..metrics import INTENT_COUNT, PARSE_FALLBACKS, UPSTREAM_ERRORS
from ..utils import get_logger
from .completion_client import ExternalCompletionClient
from .content import MISSING_CREDENTIAL_RESPONSE, MISSING_CREDENTIAL_SCRIPTURE
from .errors import ConfigurationError, UpstreamError
from .intents import LightIntent, StaticIntent
from .pipeline import (
    Fallback,
    assemble_prompt,
    augment_payload,
    build_static_payload,
    classify_light,
    classify_static,
    parse_model_output,
    payload_from_result,
)
from .schemas import GuidanceRequest

logger = get_logger("well_guidance")


class GuidanceService(Protocol):
    mode: str
    no_store: bool

    async def answer(self, request: GuidanceRequest) -> dict[str, Any]: ...

    async def aclose(self) -> None: ...


class StaticGuidanceService:
    """Deterministic answers from the curated content tables. No network."""

    mode = "static"
    no_store = False

    async def answer(self, request: GuidanceRequest) -> dict[str, Any]:
        intent = classify_static(request.query)
        INTENT_COUNT.labels(mode=self.mode, intent=intent.value).inc()
        crisis = intent is StaticIntent.CRISIS
        if crisis:
            logger.warning(
                "Crisis pattern matched; escalation attached", extra={"intent": intent.value}
            )
        payload = build_static_payload(intent).model_dump(mode="json")
        return augment_payload(payload, crisis=crisis, intent=intent.value)

    async def aclose(self) -> None:
        return None


class LLMGuidanceService:
    """One schema-constrained completion per request, parsed best-effort.

    Order matters: the crisis verdict is taken from the user's query before
    the model is called, and applied after parsing so the model cannot
    override it.
    """

    mode = "llm"
    no_store = True

    def __init__(
        self,
        *,
        client: ExternalCompletionClient,
        defaults: Optional[GuidanceDefaults] = None,
    ) -> None:
        self.client = client
        self.defaults = defaults or GuidanceDefaults()

    async def answer(self, request: GuidanceRequest) -> dict[str, Any]:
        intent = classify_light(request.query)
        INTENT_COUNT.labels(mode=self.mode, intent=intent.value).inc()
        crisis = intent is LightIntent.CRISIS
        if crisis:
            logger.warning(
                "Crisis pattern matched; escalation attached", extra={"intent": intent.value}
            )

        prompt = assemble_prompt(request, defaults=self.defaults)
        try:
            raw_text = await self.client.complete(prompt)
        except ConfigurationError:
            logger.error("OPENAI_API_KEY missing; serving degraded payload")
            return augment_payload(
                self._missing_credential_payload(intent.value),
                crisis=crisis,
                intent=intent.value,
            )
        except UpstreamError as exc:
            UPSTREAM_ERRORS.labels(kind=exc.error).inc()
            raise

        result = parse_model_output(raw_text)
        if isinstance(result, Fallback):
            PARSE_FALLBACKS.inc()
            logger.info("Model output was not a JSON object; wrapped verbatim")
        return augment_payload(
            payload_from_result(result, intent.value),
            crisis=crisis,
            intent=intent.value,
        )

    @staticmethod
    def _missing_credential_payload(intent: str) -> dict[str, Any]:
        return {
            "response": MISSING_CREDENTIAL_RESPONSE,
            "scripture_pathway": [MISSING_CREDENTIAL_SCRIPTURE.model_dump()],
            "next_steps": [],
            "reflection_prayer": None,
            "follow_up_question": None,
            "intent": intent,
        }

    async def aclose(self) -> None:
        await self.client.aclose()


def build_guidance_service(settings: AppSettings) -> GuidanceService:
    if settings.guidance_mode == "static":
        return StaticGuidanceService()
    client = ExternalCompletionClient(settings=settings.completion)
    return LLMGuidanceService(client=client, defaults=settings.defaults)

from __future__ import annotations

import time
from typing import Any

import httpx

from ..config import CompletionSettings
from ..utils import get_logger
from .errors import ConfigurationError, UpstreamError
from .pipeline import PromptSet

logger = get_logger("well_completion")


def _extract_content(data: Any) -> str:
    """``choices[0].message.content`` or an empty string."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices") or []
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message") or {}
    if not isinstance(message, dict):
        return ""
    return str(message.get("content") or "")


class ExternalCompletionClient:
    """Async OpenAI-compatible chat-completion client with a persistent connection pool.

    One attempt per call. A non-2xx status or a transport failure raises
    ``UpstreamError`` immediately; nothing is retried and no content is
    substituted.
    """

    def __init__(self, *, settings: CompletionSettings) -> None:
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self.model = settings.model
        # Persistent client, created lazily and shared across requests
        self._client: httpx.AsyncClient | None = None

    @property
    def has_credential(self) -> bool:
        return bool(self.settings.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Return (or create) the shared async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.settings.timeout_seconds,
                limits=httpx.Limits(
                    max_connections=20,
                    max_keepalive_connections=10,
                    keepalive_expiry=30.0,
                ),
            )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying connection pool (call at app shutdown)."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _request_body(self, prompt: PromptSet) -> dict[str, Any]:
        s = self.settings
        return {
            "model": s.model,
            "temperature": s.temperature,
            "top_p": s.top_p,
            "presence_penalty": s.presence_penalty,
            "frequency_penalty": s.frequency_penalty,
            "messages": prompt.to_messages(),
        }

    async def complete(self, prompt: PromptSet) -> str:
        if not self.has_credential:
            raise ConfigurationError("missing credential", "OPENAI_API_KEY is not set")

        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
            "Cache-Control": "no-store",
        }
        try:
            client = self._get_client()
            response = await client.post(
                f"{self.base_url}/chat/completions",
                params={"ts": int(time.time() * 1000)},
                headers=headers,
                json=self._request_body(prompt),
            )
        except httpx.HTTPError as exc:
            logger.warning("Completion call failed: %s", exc)
            raise UpstreamError("model call failed", str(exc)) from exc

        if response.status_code < 200 or response.status_code >= 300:
            logger.warning("Completion upstream returned status=%d", response.status_code)
            raise UpstreamError("upstream", response.text, status=response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("Completion upstream sent an undecodable body: %s", exc)
            raise UpstreamError("model call failed", str(exc)) from exc
        return _extract_content(data)

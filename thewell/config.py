"""
config.py

Runtime configuration for the guidance service.

Principle:
- Credentials, model choice and prompt defaults are NOT read inside the core.
- They are resolved once at startup into frozen dataclasses and passed in
  explicitly (``create_app(settings)``, ``build_guidance_service(settings)``).

Every env-backed field maps 1-to-1 to an upper-case environment variable.
Tests build the dataclasses directly instead of mutating the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

GuidanceMode = Literal["llm", "static"]

DEFAULT_TRANSLATION_ORDER: Tuple[str, ...] = ("ESV", "CSB", "NIV", "NKJV")


# ── Helpers ──────────────────────────────────────────────────────────────────

def _env(key: str, default: str = "") -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


def _env_optional(key: str) -> Optional[str]:
    value = os.getenv(key, "").strip()
    return value or None


def _env_mode(key: str, default: GuidanceMode) -> GuidanceMode:
    value = os.getenv(key, default).strip().lower()
    if value not in ("llm", "static"):
        raise ValueError(f"{key} must be 'llm' or 'static', got {value!r}")
    return value  # type: ignore[return-value]


# ── Settings dataclasses ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class ServerSettings:
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", 8000))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "info"))
    timeout_graceful_shutdown: int = field(
        default_factory=lambda: _env_int("GRACEFUL_SHUTDOWN_SECONDS", 10)
    )
    # One deployment serves one mode; there is no per-request switch.
    guidance_mode: GuidanceMode = field(
        default_factory=lambda: _env_mode("GUIDANCE_MODE", "llm")
    )


@dataclass(frozen=True)
class CompletionSettings:
    """
    Outbound chat-completion configuration.

    api_key:
    - ``None`` means the credential is missing. The LLM service answers with
      a degraded 200 payload instead of an HTTP error in that case.

    Sampling parameters are fixed per deployment, never taken from the request.
    """

    api_key: Optional[str] = field(
        default_factory=lambda: _env_optional("OPENAI_API_KEY")
    )
    base_url: str = field(
        default_factory=lambda: _env("OPENAI_BASE_URL", "https://api.openai.com/v1")
    )
    model: str = field(default_factory=lambda: _env("OPENAI_MODEL", "gpt-4o-mini"))
    temperature: float = 0.7
    top_p: float = 0.9
    presence_penalty: float = 0.1
    frequency_penalty: float = 0.1
    timeout_seconds: float = field(
        default_factory=lambda: _env_float("OPENAI_TIMEOUT_SECONDS", 60.0)
    )


@dataclass(frozen=True)
class GuidanceDefaults:
    """Fallbacks for the client-supplied prompt constraints."""

    translation_order: Tuple[str, ...] = DEFAULT_TRANSLATION_ORDER
    xref_limit: int = 5
    max_quote_words: int = 120
    depth: str = "deep"


@dataclass(frozen=True)
class AppSettings:
    server: ServerSettings = field(default_factory=ServerSettings)
    completion: CompletionSettings = field(default_factory=CompletionSettings)
    defaults: GuidanceDefaults = field(default_factory=GuidanceDefaults)

    @property
    def guidance_mode(self) -> GuidanceMode:
        return self.server.guidance_mode

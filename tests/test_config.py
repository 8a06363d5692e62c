from __future__ import annotations

import dataclasses

import pytest

from thewell.config import (
    DEFAULT_TRANSLATION_ORDER,
    AppSettings,
    CompletionSettings,
    GuidanceDefaults,
    ServerSettings,
)


def test_completion_settings_read_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_BASE_URL", "https://proxy.test/v1")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-x")
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "12.5")
    s = CompletionSettings()
    assert s.api_key == "sk-env"
    assert s.base_url == "https://proxy.test/v1"
    assert s.model == "gpt-x"
    assert s.timeout_seconds == 12.5
    assert (s.temperature, s.top_p, s.presence_penalty, s.frequency_penalty) == (0.7, 0.9, 0.1, 0.1)


def test_blank_api_key_means_missing(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "   ")
    assert CompletionSettings().api_key is None
    monkeypatch.delenv("OPENAI_API_KEY")
    assert CompletionSettings().api_key is None


def test_bad_numeric_env_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "soon")
    assert ServerSettings().port == 8000
    assert CompletionSettings().timeout_seconds == 60.0


def test_guidance_mode_from_env(monkeypatch):
    monkeypatch.setenv("GUIDANCE_MODE", "STATIC")
    assert AppSettings().guidance_mode == "static"
    monkeypatch.setenv("GUIDANCE_MODE", "hybrid")
    with pytest.raises(ValueError, match="GUIDANCE_MODE"):
        ServerSettings()


def test_defaults_and_immutability():
    d = GuidanceDefaults()
    assert d.translation_order == DEFAULT_TRANSLATION_ORDER == ("ESV", "CSB", "NIV", "NKJV")
    assert (d.xref_limit, d.max_quote_words, d.depth) == (5, 120, "deep")
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.xref_limit = 1  # type: ignore[misc]

"""Tests for thewell/cli/ask.py and the main.py dispatcher."""

from __future__ import annotations

import json
from unittest.mock import patch

import main
from thewell.cli.ask import cmd_ask
from thewell.config import AppSettings, CompletionSettings, ServerSettings


def test_cmd_ask_static_prints_payload(capsys) -> None:
    settings = AppSettings(server=ServerSettings(guidance_mode="llm"))
    payload = cmd_ask("I'm anxious about tomorrow", static=True, settings=settings)

    assert payload["intent"] == "anxiety"
    printed = json.loads(capsys.readouterr().out)
    assert printed == payload


def test_cmd_ask_llm_without_credential_is_degraded(capsys) -> None:
    settings = AppSettings(
        server=ServerSettings(guidance_mode="llm"),
        completion=CompletionSettings(api_key=None),
    )
    payload = cmd_ask("Does God exist?", mode_tag="/debate", settings=settings)
    assert payload["intent"] == "existence"
    assert payload["response"].startswith("configuration error")


def test_main_dispatches_ask_and_serve(monkeypatch) -> None:
    monkeypatch.setenv("GUIDANCE_MODE", "static")
    with patch("thewell.cli.ask.cmd_ask") as mock_ask:
        main.main(["ask", "How do I pray?", "--mode-tag", "/pray"])
    args, kwargs = mock_ask.call_args
    assert args == ("How do I pray?",)
    assert kwargs["mode_tag"] == "/pray"
    assert kwargs["static"] is False

    with patch("thewell.cli.serve.cmd_serve_api") as mock_serve:
        main.main(["serve-api", "--port", "9001"])
    assert mock_serve.call_args.kwargs["port"] == 9001

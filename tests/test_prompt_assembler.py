from __future__ import annotations

import thewell.guidance.pipeline.prompt_assembler as pa
from thewell.config import GuidanceDefaults
from thewell.guidance.schemas import GuidanceRequest


def _request(**body) -> GuidanceRequest:
    body.setdefault("query", "What is grace?")
    return GuidanceRequest.model_validate(body)


def test_defaults_are_interpolated_when_config_is_absent():
    prompt = pa.assemble_prompt(_request(), defaults=GuidanceDefaults())
    assert prompt.user.startswith("Question: What is grace?\nMode: none\nDepth: deep\n")
    assert "Quote from ESV → CSB → NIV → NKJV. Keep direct quotes ≤ 120 words." in prompt.user
    assert "Use ≤ 5 cross-references unless the user requested /study." in prompt.user
    assert prompt.user.rstrip().endswith("JSON only.")
    assert pa.SCHEMA_PROMPT in prompt.user


def test_client_constraints_override_defaults():
    request = _request(
        mode="/study",
        depth="brief",
        config={"translationOrder": ["NIV", "ESV"], "xrefLimit": 2, "maxQuoteWords": 40},
    )
    prompt = pa.assemble_prompt(request, defaults=GuidanceDefaults())
    assert "Mode: /study" in prompt.user
    assert "Depth: brief" in prompt.user
    assert "Quote from NIV → ESV. Keep direct quotes ≤ 40 words." in prompt.user
    assert "Use ≤ 2 cross-references" in prompt.user


def test_all_six_mode_formats_are_listed():
    prompt = pa.assemble_prompt(_request(), defaults=GuidanceDefaults())
    assert set(pa.MODE_FORMATS) == {"/ask", "/study", "/pray", "/plan", "/debate", "/share"}
    for mode, shape in pa.MODE_FORMATS.items():
        assert f"{mode} → {shape}" in prompt.user


def test_preambles_pass_through_verbatim_as_system_messages():
    request = _request(prompts={"system": "You are a pastor.", "developer": "Be brief."})
    prompt = pa.assemble_prompt(request, defaults=GuidanceDefaults())
    messages = prompt.to_messages()
    assert [m["role"] for m in messages] == ["system", "system", "user"]
    assert messages[0]["content"] == "You are a pastor."
    assert messages[1]["content"] == "Be brief."
    assert messages[2]["content"] == prompt.user


def test_deployment_defaults_are_used():
    defaults = GuidanceDefaults(translation_order=("CSB",), xref_limit=9, max_quote_words=15, depth="short")
    prompt = pa.assemble_prompt(_request(), defaults=defaults)
    assert "Quote from CSB. Keep direct quotes ≤ 15 words." in prompt.user
    assert "Use ≤ 9 cross-references" in prompt.user
    assert "Depth: short" in prompt.user

from __future__ import annotations

import pytest

import thewell.guidance.pipeline.intent_classifier as ic
from thewell.guidance.intents import LightIntent, StaticIntent


def test_crisis_rule_is_first_in_both_chains():
    assert ic.STATIC_RULES[0] == (ic.CRISIS_PATTERN, StaticIntent.CRISIS)
    assert ic.LIGHT_RULES[0] == (ic.CRISIS_PATTERN, LightIntent.CRISIS)


@pytest.mark.parametrize(
    "query",
    [
        "I want to die",
        "I want to die and I have anxiety",
        "thinking about suicide, also how do I pray?",
        "I keep wanting to self harm",
        "my husband's abuse is getting worse, is my salvation secure?",
        "I think I might overdose",
    ],
)
def test_crisis_takes_precedence_over_other_topics(query):
    assert ic.classify_static(query) is StaticIntent.CRISIS
    assert ic.classify_light(query) is LightIntent.CRISIS
    assert ic.is_crisis(query) is True


def test_classification_is_case_insensitive():
    assert ic.classify_static("I WANT TO DIE") is StaticIntent.CRISIS
    assert ic.classify_light("Did Jesus RISE from the dead?") is LightIntent.RESURRECTION


@pytest.mark.parametrize(
    "query, expected",
    [
        ("How can I have assurance I'm forgiven?", StaticIntent.ASSURANCE),
        ("Am I really saved?", StaticIntent.ASSURANCE),
        ("How should I pray when I feel distant?", StaticIntent.PRAYER),
        ("I'm so anxious about work", StaticIntent.ANXIETY),
        ("I struggle with lust", StaticIntent.PURITY),
        ("Why is there so much grief in my life?", StaticIntent.SUFFERING),
        ("Where should I start reading?", StaticIntent.GENERAL),
    ],
)
def test_static_taxonomy(query, expected):
    assert ic.classify_static(query) is expected


@pytest.mark.parametrize(
    "query, expected",
    [
        ("What about the empty tomb?", LightIntent.RESURRECTION),
        ("Does God exist at all?", LightIntent.EXISTENCE),
        ("the problem of evil", LightIntent.EVIL),
        ("Is the Bible reliable as a historical document?", LightIntent.BIBLIOLOGY),
        ("Explain the Trinity", LightIntent.TRINITY),
        ("Is Jesus God?", LightIntent.CHRISTOLOGY),
        ("What does born again mean?", LightIntent.SOTERIOLOGY),
        ("Recommend a devotional", LightIntent.GENERAL),
    ],
)
def test_light_taxonomy(query, expected):
    assert ic.classify_light(query) is expected


def test_rule_order_is_priority_order():
    # Matches both "existence" and "evil"; existence is listed first.
    assert ic.classify_light("atheists raise the problem of evil") is LightIntent.EXISTENCE


def test_empty_and_none_queries_are_general():
    assert ic.classify_static(None) is StaticIntent.GENERAL
    assert ic.classify_static("") is StaticIntent.GENERAL
    assert ic.classify_light(None) is LightIntent.GENERAL
    assert ic.is_crisis(None) is False

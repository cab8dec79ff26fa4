"""Tests for prompt building and the Claude-backed recommendation composer."""

import asyncio
from types import SimpleNamespace

import anthropic
import httpx
import pytest

from analyzer.prompts import SEO_FOCUS_AREAS, build_content_prompt, select_audits_for_prompt
from analyzer.recommendations import RecommendationComposer
from errors import RecommendationError
from models import AuditCheck, PageLink, PageList, SummarizedPageContent


def make_check(check_id, score):
    return AuditCheck(id=check_id, title=check_id.replace("-", " "), description="", score=score)


def bad_request_error():
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    response = httpx.Response(400, request=request)
    return anthropic.BadRequestError("invalid request", response=response, body=None)


def test_audit_selection_drops_zero_and_not_applicable_scores():
    audits = [
        make_check("zero", 0),
        make_check("na", None),
        make_check("a", 0.5),
        make_check("b", 1),
        make_check("c", 0.9),
        make_check("zero-again", 0.0),
        make_check("d", 0.1),
        make_check("e", 0.75),
        make_check("f", 0.3),
    ]

    selected = select_audits_for_prompt(audits)

    assert [a.id for a in selected] == ["a", "b", "c", "d", "e"]


def test_content_prompt_lists_content_and_focus_areas():
    content = SummarizedPageContent(
        title="Acme Widgets",
        meta_description="Buy widgets",
        headings={1: ["Widgets"], 2: ["Blue", "Red"], 3: [], 4: [], 5: [], 6: []},
        paragraphs=["First paragraph", "Second paragraph"],
        lists=[PageList(type="ordered", items=["one"])],
        links=[PageLink(href="https://acme.test/", text="Home")],
    )

    prompt = build_content_prompt(content, "https://acme.test/")

    assert "URL: https://acme.test/" in prompt
    assert "Title: Acme Widgets" in prompt
    assert "Meta Description: Buy widgets" in prompt
    assert "H2: Blue | Red" in prompt
    assert "First paragraph\n\nSecond paragraph" in prompt
    assert '"type": "ordered"' in prompt
    for i, area in enumerate(SEO_FOCUS_AREAS, 1):
        assert f"{i}. {area}" in prompt
    assert len(SEO_FOCUS_AREAS) == 10


def test_content_recommendations_call_model_with_fixed_parameters(fake_claude):
    client = fake_claude(text="Improve your title tag.")
    composer = RecommendationComposer(client, model="claude-test")

    result = asyncio.run(
        composer.content_recommendations(SummarizedPageContent(title="x"), "https://x.test/")
    )

    assert result == "Improve your title tag."
    call = client.messages.calls[0]
    assert call["model"] == "claude-test"
    assert call["max_tokens"] == 2000
    assert call["temperature"] == 0.7
    assert call["messages"][0]["role"] == "user"
    assert "https://x.test/" in call["messages"][0]["content"]


def test_audit_recommendations_send_only_selected_audits(fake_claude):
    client = fake_claude(text="Problem: ...")
    composer = RecommendationComposer(client, model="claude-test")
    audits = [make_check("skipped-zero", 0), make_check("kept", 0.4)]

    result = asyncio.run(composer.audit_recommendations(audits))

    prompt = client.messages.calls[0]["messages"][0]["content"]
    assert result == "Problem: ..."
    assert '"id": "kept"' in prompt
    assert "skipped-zero" not in prompt
    assert "about 1000 words" in prompt


def test_response_without_text_returns_empty_string(fake_claude):
    client = fake_claude(content=[SimpleNamespace(type="tool_use", id="t1")])
    composer = RecommendationComposer(client, model="claude-test")

    assert asyncio.run(composer.audit_recommendations([])) == ""


def test_api_error_is_raised_as_recommendation_error(fake_claude):
    client = fake_claude(error=bad_request_error())
    composer = RecommendationComposer(client, model="claude-test")

    with pytest.raises(RecommendationError):
        asyncio.run(composer.audit_recommendations([make_check("a", 1)]))


def test_unexpected_error_propagates(fake_claude):
    client = fake_claude(error=RuntimeError("boom"))
    composer = RecommendationComposer(client, model="claude-test")

    with pytest.raises(RuntimeError):
        asyncio.run(composer.content_recommendations(SummarizedPageContent(), "https://x.test/"))

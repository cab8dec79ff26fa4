"""Tests for the analyze/screenshot pipeline and browser session scoping."""

import asyncio
import base64
from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest
from playwright.async_api import Error as PlaywrightError

from analyzer.pipeline import PageAnalyzer
from analyzer.recommendations import RecommendationComposer
from errors import AnalysisError

RAW_CONTENT = {
    "title": "Acme",
    "metaDescription": "Widgets",
    "headings": {"1": ["Acme widgets"]},
    "paragraphs": ["w" * 500],
    "lists": [],
    "links": [{"href": "https://acme.test/", "text": "Home"}],
    "images": [],
}


class RecordingPage:
    def __init__(self, goto_error=None):
        self.goto_error = goto_error
        self.actions = []

    async def goto(self, url, **kwargs):
        self.actions.append("goto")
        if self.goto_error:
            raise self.goto_error
        return SimpleNamespace(status=200)

    async def screenshot(self, **kwargs):
        self.actions.append(("screenshot", kwargs.get("full_page")))
        return b"png-bytes"

    async def evaluate(self, script):
        self.actions.append("evaluate")
        return RAW_CONTENT


class SessionTracker:
    def __init__(self, page):
        self.page = page
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def __call__(self, settings):
        self.opened += 1
        try:
            yield self.page
        finally:
            self.closed += 1


def test_analyze_uses_one_session_for_screenshot_and_content(settings, fake_claude):
    page = RecordingPage()
    sessions = SessionTracker(page)
    client = fake_claude(text="Shorten paragraphs.")
    analyzer = PageAnalyzer(RecommendationComposer(client, model="claude-test"), settings, sessions)

    screenshot, analysis = asyncio.run(analyzer.analyze("https://acme.test/"))

    assert base64.b64decode(screenshot) == b"png-bytes"
    assert analysis == "Shorten paragraphs."
    assert page.actions == ["goto", ("screenshot", True), "evaluate"]
    assert sessions.opened == sessions.closed == 1
    prompt = client.messages.calls[0]["messages"][0]["content"]
    assert "w" * 197 + "..." in prompt
    assert "w" * 198 not in prompt


def test_browser_session_closed_when_navigation_fails(settings, fake_claude):
    sessions = SessionTracker(RecordingPage(goto_error=PlaywrightError("Timeout 90000ms exceeded")))
    client = fake_claude()
    analyzer = PageAnalyzer(RecommendationComposer(client, model="claude-test"), settings, sessions)

    with pytest.raises(AnalysisError):
        asyncio.run(analyzer.analyze("https://slow.test/"))

    assert sessions.closed == 1
    assert client.messages.calls == []


def test_screenshot_only(settings, fake_claude):
    page = RecordingPage()
    sessions = SessionTracker(page)
    analyzer = PageAnalyzer(RecommendationComposer(fake_claude(), model="claude-test"), settings, sessions)

    screenshot = asyncio.run(analyzer.screenshot("https://acme.test/"))

    assert base64.b64decode(screenshot) == b"png-bytes"
    assert page.actions == ["goto", ("screenshot", True)]
    assert sessions.closed == 1

"""Tests for page loading and DOM content extraction."""

import asyncio
from types import SimpleNamespace

import pytest
from playwright.async_api import Error as PlaywrightError, async_playwright

from analyzer.extractor import build_page_content, extract_page_content, load_page
from errors import AnalysisError

SAMPLE_HTML = """
<html>
  <head>
    <title>Sample Page</title>
    <meta name="description" content="A page used in tests">
  </head>
  <body>
    <h1>First heading</h1>
    <p>Paragraph one</p>
    <h1>Second heading</h1>
    <h2>Sub heading</h2>
    <p>Paragraph two</p>
    <ul>
      <li>Item 1</li>
      <li>Item 2</li>
      <li>Item 3</li>
      <li>Item 4</li>
    </ul>
    <p>Paragraph three</p>
    <a href="https://example.com/about">About us</a>
    <img src="logo.png" alt="Company logo">
    <img src="spacer.png">
  </body>
</html>
"""


class FakePage:
    def __init__(self, raw=None, status=200, goto_error=None):
        self.raw = raw
        self.status = status
        self.goto_error = goto_error
        self.goto_calls = []

    async def goto(self, url, **kwargs):
        self.goto_calls.append((url, kwargs))
        if self.goto_error:
            raise self.goto_error
        return SimpleNamespace(status=self.status)

    async def evaluate(self, script):
        return self.raw


def test_build_page_content_fills_missing_fields():
    raw = {
        "title": "Title",
        "metaDescription": "",
        "headings": {"1": ["Main"], "3": ["Deep"]},
        "paragraphs": ["Text"],
        "lists": [{"tag": "ol", "items": ["a", "b"]}, {"tag": "ul", "items": []}],
        "links": [{"href": "https://example.com/", "text": "Home"}],
        "images": [{"alt": ""}],
    }

    content = build_page_content(raw)

    assert content.title == "Title"
    assert content.meta_description == ""
    assert content.headings == {1: ["Main"], 2: [], 3: ["Deep"], 4: [], 5: [], 6: []}
    assert [(l.type, l.items) for l in content.lists] == [("ordered", ["a", "b"]), ("unordered", [])]
    assert content.links[0].href == "https://example.com/"
    assert content.images[0].alt == ""


def test_load_page_waits_for_network_idle():
    page = FakePage()
    asyncio.run(load_page(page, "https://example.com", timeout_ms=1000))
    url, kwargs = page.goto_calls[0]
    assert url == "https://example.com"
    assert kwargs["wait_until"] == "networkidle"
    assert kwargs["timeout"] == 1000


def test_navigation_error_becomes_analysis_error():
    page = FakePage(goto_error=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))
    with pytest.raises(AnalysisError) as exc_info:
        asyncio.run(load_page(page, "https://does-not-exist.invalid"))
    assert "analysis failed" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, PlaywrightError)


def test_error_status_becomes_analysis_error():
    page = FakePage(status=404)
    with pytest.raises(AnalysisError):
        asyncio.run(load_page(page, "https://example.com/missing"))


def test_extract_page_content_uses_evaluated_dom():
    raw = {"title": "From fake", "headings": {}, "paragraphs": ["p"]}
    content = asyncio.run(extract_page_content(FakePage(raw=raw)))
    assert content.title == "From fake"
    assert content.paragraphs == ["p"]


def test_extracts_sample_page_in_document_order():
    async def run():
        async with async_playwright() as p:
            try:
                browser = await p.chromium.launch(headless=True)
            except PlaywrightError:
                return None
            try:
                page = await browser.new_page()
                await page.set_content(SAMPLE_HTML)
                return await extract_page_content(page)
            finally:
                await browser.close()

    content = asyncio.run(run())
    if content is None:
        pytest.skip("Chromium is not installed for Playwright")

    assert content.title == "Sample Page"
    assert content.meta_description == "A page used in tests"
    assert content.headings[1] == ["First heading", "Second heading"]
    assert content.headings[2] == ["Sub heading"]
    assert content.paragraphs == ["Paragraph one", "Paragraph two", "Paragraph three"]
    assert len(content.lists) == 1
    assert content.lists[0].type == "unordered"
    assert content.lists[0].items == ["Item 1", "Item 2", "Item 3", "Item 4"]
    assert [(l.href, l.text) for l in content.links] == [("https://example.com/about", "About us")]
    assert [i.alt for i in content.images] == ["Company logo", ""]

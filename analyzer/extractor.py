"""
Content extraction for SEO analysis.

Loads a URL in a Playwright page, waits for the network to go idle, and pulls
the SEO-relevant parts of the rendered DOM into a PageContent.
"""

import logging
from typing import Any, Dict

from playwright.async_api import Page, Error as PlaywrightError

from errors import AnalysisError
from models import PageContent, PageImage, PageLink, PageList

logger = logging.getLogger(__name__)

# Runs inside the page; everything is collected in document order.
EXTRACT_CONTENT_JS = """
() => {
    const getText = (selector) =>
        Array.from(document.querySelectorAll(selector)).map((el) => el.textContent || "");

    const meta = document.querySelector('meta[name="description"]');

    const headings = {};
    for (let level = 1; level <= 6; level++) {
        headings[level] = getText(`h${level}`);
    }

    return {
        title: document.title,
        metaDescription: meta ? meta.getAttribute("content") || "" : "",
        headings: headings,
        paragraphs: getText("p"),
        lists: Array.from(document.querySelectorAll("ul, ol")).map((list) => ({
            tag: list.tagName.toLowerCase(),
            items: Array.from(list.querySelectorAll("li")).map((li) => li.textContent || ""),
        })),
        links: Array.from(document.querySelectorAll("a")).map((a) => ({
            href: a.href,
            text: a.textContent || "",
        })),
        images: Array.from(document.querySelectorAll("img")).map((img) => ({
            alt: img.alt || "",
        })),
    };
}
"""


async def load_page(page: Page, url: str, timeout_ms: int = 90000) -> None:
    """
    Navigate to url and wait until there have been no network connections
    for at least 500 ms.

    Raises:
        AnalysisError: navigation failed, timed out, or returned an error status
    """
    logger.info(f"📡 Navigating to {url}")
    try:
        response = await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
    except PlaywrightError as e:
        raise AnalysisError(f"analysis failed: could not load {url}") from e

    if response is not None and response.status >= 400:
        raise AnalysisError(
            f"analysis failed: {url} responded with HTTP {response.status}"
        )


def build_page_content(raw: Dict[str, Any]) -> PageContent:
    """Convert the object returned by EXTRACT_CONTENT_JS into a PageContent."""
    raw_headings = raw.get("headings") or {}
    headings = {
        level: list(raw_headings.get(str(level)) or raw_headings.get(level) or [])
        for level in range(1, 7)
    }

    return PageContent(
        title=raw.get("title") or "",
        meta_description=raw.get("metaDescription") or "",
        headings=headings,
        paragraphs=list(raw.get("paragraphs") or []),
        lists=[
            PageList(
                type="ordered" if item.get("tag") == "ol" else "unordered",
                items=list(item.get("items") or []),
            )
            for item in raw.get("lists") or []
        ],
        links=[
            PageLink(href=link.get("href") or "", text=link.get("text") or "")
            for link in raw.get("links") or []
        ],
        images=[PageImage(alt=image.get("alt") or "") for image in raw.get("images") or []],
    )


async def extract_page_content(page: Page) -> PageContent:
    """
    Extract title, meta description, headings, paragraphs, lists, links and
    images from an already loaded page.
    """
    try:
        raw = await page.evaluate(EXTRACT_CONTENT_JS)
    except PlaywrightError as e:
        raise AnalysisError("analysis failed: content extraction error") from e

    content = build_page_content(raw)
    logger.info(
        f"✓ Extracted {sum(len(h) for h in content.headings.values())} headings, "
        f"{len(content.paragraphs)} paragraphs, {len(content.lists)} lists, "
        f"{len(content.links)} links, {len(content.images)} images"
    )
    return content

"""
Page analysis pipeline for SEO Analyzer.

Opens one browser session per request, captures the screenshot and extracts
content from the same loaded page, then asks Claude for recommendations.
"""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable, Tuple

from analyzer.extractor import extract_page_content, load_page
from analyzer.recommendations import RecommendationComposer
from analyzer.screenshot import capture_screenshot
from analyzer.summarizer import summarize_page_content
from browser_session import open_page
from config import Settings

logger = logging.getLogger(__name__)


class PageAnalyzer:
    def __init__(
        self,
        composer: RecommendationComposer,
        settings: Settings,
        page_factory: Callable[..., AbstractAsyncContextManager] = open_page,
    ):
        self.composer = composer
        self.settings = settings
        self.page_factory = page_factory

    @property
    def navigation_timeout_ms(self) -> int:
        return self.settings.NAVIGATION_TIMEOUT * 1000

    async def analyze(self, url: str) -> Tuple[str, str]:
        """
        Analyzes a website's on-page SEO.

        Args:
            url: The website URL to analyze

        Returns:
            (base64 full-page screenshot, recommendation text)
        """
        async with self.page_factory(self.settings) as page:
            await load_page(page, url, timeout_ms=self.navigation_timeout_ms)
            screenshot = await capture_screenshot(page)
            content = await extract_page_content(page)

        summary = summarize_page_content(content)
        analysis = await self.composer.content_recommendations(summary, url)
        logger.info(f"✅ SEO analysis complete for {url} ({len(analysis)} chars)")
        return screenshot, analysis

    async def screenshot(self, url: str) -> str:
        """Full-page screenshot of url as base64."""
        async with self.page_factory(self.settings) as page:
            await load_page(page, url, timeout_ms=self.navigation_timeout_ms)
            return await capture_screenshot(page)

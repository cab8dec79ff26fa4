"""
Browser session manager for SEO Analyzer
Launches a dedicated Playwright browser per logical operation and always tears it down
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from playwright.async_api import async_playwright, Page
import logging

from config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

BROWSER_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--disable-dev-shm-usage",  # Prevents memory issues in Docker
    "--no-sandbox",  # Required in some containerized environments
    "--disable-setuid-sandbox",
    "--disable-gpu",
]

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@asynccontextmanager
async def open_page(settings: Optional[Settings] = None) -> AsyncIterator[Page]:
    """
    Launch a headless Chromium, open a fresh context and page, and close
    everything on exit regardless of how the block ends.

    Browsers are never shared between requests.

    Args:
        settings: Settings providing the viewport size (defaults to global settings)

    Yields:
        Playwright Page ready for navigation
    """
    settings = settings or default_settings

    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=True, args=BROWSER_ARGS)
        except Exception as e:
            logger.error(f"❌ Browser launch failed: {str(e)}")
            raise RuntimeError(f"Failed to launch browser: {str(e)}") from e

        try:
            context = await browser.new_context(
                viewport={
                    "width": settings.VIEWPORT_WIDTH,
                    "height": settings.VIEWPORT_HEIGHT,
                },
                user_agent=USER_AGENT,
            )
            page = await context.new_page()
            logger.info("✅ Browser session opened")
            yield page
        finally:
            try:
                await browser.close()
                logger.info("✅ Browser session closed")
            except Exception as e:
                logger.warning(f"⚠️  Error closing browser: {str(e)}")

"""
Full-page screenshot capture.
"""

import base64
import logging

from playwright.async_api import Page, Error as PlaywrightError

from errors import AnalysisError

logger = logging.getLogger(__name__)


async def capture_screenshot(page: Page) -> str:
    """
    Capture the whole scrollable page as PNG.

    Returns:
        Base64-encoded image
    """
    try:
        screenshot_bytes = await page.screenshot(full_page=True, type="png")
    except PlaywrightError as e:
        raise AnalysisError("analysis failed: screenshot capture error") from e

    logger.info(f"📸 Captured full-page screenshot ({len(screenshot_bytes)} bytes)")
    return base64.b64encode(screenshot_bytes).decode("utf-8")

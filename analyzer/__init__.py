# Analyzer package - page content SEO analysis
from .extractor import extract_page_content, load_page
from .summarizer import summarize, summarize_page_content
from .screenshot import capture_screenshot
from .recommendations import RecommendationComposer
from .pipeline import PageAnalyzer

__all__ = [
    "extract_page_content",
    "load_page",
    "summarize",
    "summarize_page_content",
    "capture_screenshot",
    "RecommendationComposer",
    "PageAnalyzer",
]

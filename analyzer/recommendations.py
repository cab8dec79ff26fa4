"""
Turns extracted content and Lighthouse checks into SEO recommendations via Claude.
"""

import logging
from typing import Any, List

import anthropic

from analyzer.prompts import build_audit_prompt, build_content_prompt, select_audits_for_prompt
from errors import RecommendationError
from models import AuditCheck, SummarizedPageContent
from utils.clients.claude import call_anthropic_api_with_retry, extract_text

logger = logging.getLogger(__name__)


class RecommendationComposer:
    """
    Builds prompts and requests completions. Both variants return the model
    text verbatim, or "" when the response carries no text.
    """

    def __init__(
        self,
        client: Any,
        model: str,
        max_tokens: int = 2000,
        temperature: float = 0.7,
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def _complete(self, prompt: str) -> str:
        try:
            message = await call_anthropic_api_with_retry(
                self.client,
                prompt,
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except anthropic.APIError as e:
            logger.error(f"❌ Anthropic API failure: {str(e)}")
            raise RecommendationError(f"AI recommendation service failed: {str(e)}") from e

        return extract_text(message)

    async def content_recommendations(self, content: SummarizedPageContent, url: str) -> str:
        """SEO recommendations for the summarized content of url."""
        prompt = build_content_prompt(content, url)
        return await self._complete(prompt)

    async def audit_recommendations(self, audits: List[AuditCheck]) -> str:
        """Feedback on the first five positively scored Lighthouse checks."""
        selected = select_audits_for_prompt(audits)
        logger.info(f"🧾 Building feedback from {len(selected)} of {len(audits)} audits")
        prompt = build_audit_prompt(selected)
        return await self._complete(prompt)

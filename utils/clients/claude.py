"""
Anthropic API client utilities for SEO Analyzer.

This module contains functions for interacting with the Anthropic Claude API
with automatic retry logic for transient failures.
"""

from typing import Any, Dict

import anthropic
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

# Lazy initialization of Anthropic clients, one per API key
_anthropic_clients: Dict[str, anthropic.AsyncAnthropic] = {}


def get_anthropic_client(api_key: str) -> anthropic.AsyncAnthropic:
    """Get or create the Anthropic client instance for api_key."""
    if api_key not in _anthropic_clients:
        _anthropic_clients[api_key] = anthropic.AsyncAnthropic(api_key=api_key)
    return _anthropic_clients[api_key]


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type(
        (anthropic.APIConnectionError, anthropic.RateLimitError)
    ),
    reraise=True,
)
async def call_anthropic_api_with_retry(
    client: Any,
    prompt: str,
    model: str,
    max_tokens: int = 2000,
    temperature: float = 0.7,
):
    """
    Calls Anthropic API with automatic retry logic for transient failures.

    Retries up to 3 times for:
    - APIConnectionError (network issues)
    - RateLimitError (rate limit exceeded)

    Does NOT retry for:
    - AuthenticationError (bad API key)
    - BadRequestError (malformed request)
    - Other permanent errors

    Args:
        client: AsyncAnthropic client (or any object exposing messages.create)
        prompt: Single user message sent to the model
        model: Claude model name
        max_tokens: Output token cap
        temperature: Sampling temperature

    Returns:
        Anthropic message response
    """
    return await client.messages.create(
        model=model,
        max_tokens=max_tokens,
        temperature=temperature,
        messages=[
            {
                "role": "user",
                "content": prompt,
            }
        ],
    )


def extract_text(message: Any) -> str:
    """Join the text blocks of a response; empty string when there are none."""
    blocks = getattr(message, "content", None) or []
    return "".join(
        block.text
        for block in blocks
        if getattr(block, "type", None) == "text" and getattr(block, "text", None)
    )

"""Shared fakes for the SEO Analyzer test suite."""

import uuid
from types import SimpleNamespace
from typing import List

import chromadb
import pytest

from config import Settings


class FakeMessages:
    """Stands in for AsyncAnthropic.messages; records every create() call."""

    def __init__(self, text="Recommendations", error=None, content=None):
        self.text = text
        self.error = error
        self.content = content
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return SimpleNamespace(content=self.content)
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self.text)])


class FakeClaude:
    def __init__(self, **kwargs):
        self.messages = FakeMessages(**kwargs)


def letter_embedder(texts: List[str]) -> List[List[float]]:
    """Letter-frequency vectors: similar wording lands close together."""
    return [
        [float(text.lower().count(c)) for c in "abcdefghijklmnopqrstuvwxyz"] + [1.0]
        for text in texts
    ]


@pytest.fixture
def settings():
    return Settings(ANTHROPIC_API_KEY="test-key", _env_file=None)


@pytest.fixture
def fake_claude():
    return FakeClaude


@pytest.fixture
def embedder():
    return letter_embedder


@pytest.fixture
def chroma_client():
    return chromadb.EphemeralClient()


@pytest.fixture
def collection_name():
    # EphemeralClient instances share one in-memory system per process
    return f"test_{uuid.uuid4().hex[:12]}"

"""
Retrieval responder for the RAG path: similarity search plus one Claude call.
"""

import asyncio
import logging
from typing import Any, List

from errors import IndexNotReadyError
from rag.embeddings import Embedder
from rag.state import IndexState
from rag.vector_store import VectorStore
from utils.clients.claude import call_anthropic_api_with_retry, extract_text

logger = logging.getLogger(__name__)

RAG_PROMPT_TEMPLATE = (
    "You are a agent that will analyse and give statistical responses for the data "
    "CONTEXT: {context} USER QUESTION: {question}"
)

FALLBACK_ANSWER = "An error occurred while processing your request"


class RetrievalResponder:
    def __init__(
        self,
        store: VectorStore,
        embedder: Embedder,
        state: IndexState,
        client: Any,
        model: str,
        max_tokens: int = 2000,
        temperature: float = 0.7,
        top_k: int = 5,
    ):
        self.store = store
        self.embedder = embedder
        self.state = state
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.top_k = top_k

    def retrieve(self, question: str) -> List[str]:
        """Texts of the top_k chunks nearest to question."""
        if self.store.collection is None:
            self.store.connect()
        [embedding] = self.embedder([question])
        return self.store.query(embedding, self.top_k)

    async def answer(self, question: str) -> str:
        """
        Answer question from the indexed documents.

        The search holds the index lock, so a rebuild cannot clear the store
        between the readiness check and the query.

        Raises:
            IndexNotReadyError: the index has not finished building (no search is attempted)

        Any failure after that point is logged and answered with FALLBACK_ANSWER.
        """
        if not self.state.is_ready:
            raise IndexNotReadyError(self.state.status.value)

        try:
            async with self.state.lock:
                # A rebuild may have run while we waited for the lock
                if not self.state.is_ready:
                    raise IndexNotReadyError(self.state.status.value)
                chunks = await asyncio.to_thread(self.retrieve, question)
        except IndexNotReadyError:
            raise
        except Exception:
            logger.exception("Error searching the document index")
            return FALLBACK_ANSWER

        if not chunks:
            logger.warning("⚠️ No chunks retrieved for question, returning fallback answer")
            return FALLBACK_ANSWER

        try:
            logger.info(f"🔎 Retrieved {len(chunks)} chunks for question")
            prompt = RAG_PROMPT_TEMPLATE.format(context="\n\n".join(chunks), question=question)
            message = await call_anthropic_api_with_retry(
                self.client,
                prompt,
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
            return extract_text(message)
        except Exception:
            logger.exception("Error handling the query")
            return FALLBACK_ANSWER

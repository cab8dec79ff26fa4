"""
Service container for SEO Analyzer.

Every component is built once from Settings at startup and handed to the
route handlers through FastAPI dependency injection.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Optional

from fastapi import Request

from analyzer.pipeline import PageAnalyzer
from analyzer.recommendations import RecommendationComposer
from config import Settings
from errors import ConfigurationError
from rag.embeddings import ChromaDefaultEmbedder
from rag.indexer import DocumentIndexer
from rag.responder import RetrievalResponder
from rag.state import IndexState
from rag.vector_store import VectorStore, build_chroma_client
from utils.clients.claude import get_anthropic_client
from utils.clients.dataforseo import BacklinksClient
from utils.clients.lighthouse import LighthouseRunner

logger = logging.getLogger(__name__)


@dataclass
class Services:
    settings: Settings
    page_analyzer: PageAnalyzer
    composer: RecommendationComposer
    lighthouse: LighthouseRunner
    index_state: IndexState
    indexer: DocumentIndexer
    responder: RetrievalResponder
    backlinks: Optional[BacklinksClient] = None


def build_services(settings: Settings) -> Services:
    """
    Wire every component from settings.

    Raises:
        ConfigurationError: a required credential is missing
    """
    missing = settings.missing_credentials()
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    client = get_anthropic_client(settings.ANTHROPIC_API_KEY)
    composer = RecommendationComposer(
        client,
        model=settings.ANTHROPIC_MODEL,
        max_tokens=settings.MAX_TOKENS,
        temperature=settings.TEMPERATURE,
    )

    embedder = ChromaDefaultEmbedder()
    index_state = IndexState()
    store_factory = partial(
        VectorStore, settings.CHROMA_COLLECTION, partial(build_chroma_client, settings)
    )

    backlinks = None
    if settings.backlinks_configured:
        backlinks = BacklinksClient(
            settings.DATAFORSEO_LOGIN,
            settings.DATAFORSEO_PASSWORD,
            api_url=settings.DATAFORSEO_API_URL,
            limit=settings.BACKLINKS_LIMIT,
            timeout=settings.BACKLINKS_TIMEOUT,
        )
    else:
        logger.warning("⚠️  DataForSEO credentials not set, /backlinks is disabled")

    return Services(
        settings=settings,
        page_analyzer=PageAnalyzer(composer, settings),
        composer=composer,
        lighthouse=LighthouseRunner(
            binary=settings.LIGHTHOUSE_BIN,
            timeout=settings.LIGHTHOUSE_TIMEOUT,
            chrome_flags=settings.LIGHTHOUSE_CHROME_FLAGS,
        ),
        index_state=index_state,
        indexer=DocumentIndexer(
            store_factory,
            embedder,
            index_state,
            settings.RAG_SOURCE_FILES,
            chunk_size=settings.RAG_CHUNK_SIZE,
            chunk_overlap=settings.RAG_CHUNK_OVERLAP,
        ),
        responder=RetrievalResponder(
            store_factory(),
            embedder,
            index_state,
            client,
            model=settings.ANTHROPIC_MODEL,
            max_tokens=settings.MAX_TOKENS,
            temperature=settings.TEMPERATURE,
            top_k=settings.RAG_TOP_K,
        ),
        backlinks=backlinks,
    )


def get_services(request: Request) -> Services:
    """Provide the application's services for FastAPI dependency injection"""
    return request.app.state.services

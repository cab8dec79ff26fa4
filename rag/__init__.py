# RAG package - document indexing and retrieval
from .state import IndexState, IndexStatus
from .vector_store import VectorStore, build_chroma_client
from .indexer import DocumentIndexer
from .responder import RetrievalResponder, FALLBACK_ANSWER

__all__ = [
    "IndexState",
    "IndexStatus",
    "VectorStore",
    "build_chroma_client",
    "DocumentIndexer",
    "RetrievalResponder",
    "FALLBACK_ANSWER",
]

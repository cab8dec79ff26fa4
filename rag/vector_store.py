"""
ChromaDB-backed storage for document chunks and their embeddings.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

import chromadb

from config import Settings

logger = logging.getLogger(__name__)

BATCH_SIZE = 100


def build_chroma_client(settings: Settings):
    """HTTP client when CHROMA_HOST is set, otherwise a local persistent store."""
    if settings.CHROMA_HOST:
        headers = {}
        if settings.CHROMA_AUTH_TOKEN:
            headers["Authorization"] = f"Bearer {settings.CHROMA_AUTH_TOKEN}"
        return chromadb.HttpClient(
            host=settings.CHROMA_HOST,
            port=settings.CHROMA_PORT,
            ssl=settings.CHROMA_SSL,
            headers=headers if headers else None,
        )
    return chromadb.PersistentClient(path=settings.CHROMA_PERSIST_DIR)


class VectorStore:
    """
    Thin wrapper around one Chroma collection. connect() must be called
    before any other method; close() drops the client.
    """

    def __init__(self, collection_name: str, client_factory: Callable[[], Any]):
        self.collection_name = collection_name
        self.client_factory = client_factory
        self.client = None
        self.collection = None

    def connect(self) -> "VectorStore":
        self.client = self.client_factory()
        self.collection = self.client.get_or_create_collection(name=self.collection_name)
        logger.info(f"✓ Connected to collection '{self.collection_name}'")
        return self

    def close(self) -> None:
        self.collection = None
        self.client = None

    def _require_collection(self):
        if self.collection is None:
            raise RuntimeError("Vector store is not connected")
        return self.collection

    def count(self) -> int:
        return self._require_collection().count()

    def clear(self) -> int:
        """Delete every record in the collection; returns how many were removed."""
        collection = self._require_collection()
        ids = collection.get(include=[])["ids"]
        for start in range(0, len(ids), BATCH_SIZE):
            collection.delete(ids=ids[start:start + BATCH_SIZE])
        if ids:
            logger.info(f"🧹 Removed {len(ids)} existing records")
        return len(ids)

    def add(
        self,
        documents: Sequence[str],
        embeddings: Sequence[Sequence[float]],
        metadatas: Optional[Sequence[Dict[str, Any]]] = None,
    ) -> int:
        if len(documents) != len(embeddings):
            raise ValueError("documents and embeddings must have the same length")
        collection = self._require_collection()
        metadatas = list(metadatas) if metadatas is not None else [{} for _ in documents]

        for start in range(0, len(documents), BATCH_SIZE):
            end = start + BATCH_SIZE
            collection.add(
                ids=[str(i) for i in range(start, min(end, len(documents)))],
                documents=list(documents[start:end]),
                embeddings=[list(e) for e in embeddings[start:end]],
                metadatas=[m or {"source": "unknown"} for m in metadatas[start:end]],
            )
        return len(documents)

    def query(self, embedding: Sequence[float], k: int) -> List[str]:
        """Texts of the k nearest chunks, closest first."""
        collection = self._require_collection()
        available = collection.count()
        if available == 0:
            return []
        results = collection.query(
            query_embeddings=[list(embedding)],
            n_results=min(k, available),
            include=["documents", "distances"],
        )
        return list(results["documents"][0])

"""
Document indexer for the RAG path.

Rebuilds the vector store from the configured text files. Every rebuild is a
full replace: existing records are deleted before the new chunks go in, so
running it twice on the same files leaves the same index.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, List, Sequence

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from errors import IndexingError
from rag.embeddings import Embedder
from rag.state import IndexState
from rag.vector_store import VectorStore

logger = logging.getLogger(__name__)


def build_text_splitter(chunk_size: int = 500, chunk_overlap: int = 15) -> RecursiveCharacterTextSplitter:
    """Split on line boundaries; lines longer than chunk_size fall back to character splits."""
    return RecursiveCharacterTextSplitter(
        separators=["\n", ""],
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
    )


class DocumentIndexer:
    def __init__(
        self,
        store_factory: Callable[[], VectorStore],
        embedder: Embedder,
        state: IndexState,
        source_files: Sequence[str],
        chunk_size: int = 500,
        chunk_overlap: int = 15,
    ):
        self.store_factory = store_factory
        self.embedder = embedder
        self.state = state
        self.source_files = list(source_files)
        self.splitter = build_text_splitter(chunk_size, chunk_overlap)

    def split_text(self, text: str, source: str) -> List[Document]:
        return self.splitter.create_documents([text], metadatas=[{"source": source}])

    def load_documents(self) -> List[Document]:
        """Read and chunk every source file, in configured order."""
        documents: List[Document] = []
        for file_path in self.source_files:
            text = Path(file_path).read_text(encoding="utf-8")
            chunks = self.split_text(text, file_path)
            logger.info(f"  {file_path}: {len(chunks)} chunks")
            documents.extend(chunks)
        return documents

    def _rebuild(self) -> int:
        store = self.store_factory().connect()
        try:
            store.clear()
            documents = self.load_documents()
            if not documents:
                raise IndexingError("source files produced no chunks")
            texts = [doc.page_content for doc in documents]
            embeddings = self.embedder(texts)
            return store.add(
                texts,
                embeddings,
                metadatas=[doc.metadata for doc in documents],
            )
        finally:
            store.close()

    async def rebuild(self) -> int:
        """
        Rebuild the index from scratch.

        Concurrent calls wait for each other and for in-flight searches.
        Source files that yield no chunks count as a failure. On failure the
        index is marked FAILED and questions are refused until a rebuild
        succeeds.

        Returns:
            Number of chunks stored

        Raises:
            IndexingError: any step of the rebuild failed
        """
        async with self.state.lock:
            self.state.start_indexing()
            logger.info(f"📚 Rebuilding document index from {len(self.source_files)} file(s)")
            try:
                count = await asyncio.to_thread(self._rebuild)
            except Exception as e:
                self.state.mark_failed()
                logger.error(f"❌ Document index rebuild failed: {str(e)}")
                raise IndexingError(f"Document index rebuild failed: {str(e)}") from e

            self.state.mark_ready(count)
            logger.info(f"✅ Document index ready with {count} chunks")
            return count

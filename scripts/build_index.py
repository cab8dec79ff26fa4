#!/usr/bin/env python3
"""
Document Index Build Script

Rebuilds the ChromaDB document index used by /rag/query, replacing any
existing records.

Usage:
    python3 scripts/build_index.py
    python3 scripts/build_index.py --file data/data.txt --file data/book.txt
    python3 scripts/build_index.py --collection embeddings_col
"""

import argparse
import asyncio
import os
import sys
from functools import partial

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dotenv import load_dotenv

from config import Settings
from errors import IndexingError
from rag.embeddings import ChromaDefaultEmbedder
from rag.indexer import DocumentIndexer
from rag.state import IndexState
from rag.vector_store import VectorStore, build_chroma_client


def main() -> int:
    parser = argparse.ArgumentParser(description="Rebuild the RAG document index")
    parser.add_argument(
        "--file",
        action="append",
        dest="files",
        help="Source text file (repeatable, defaults to RAG_SOURCE_FILES)",
    )
    parser.add_argument("--collection", help="Collection name (defaults to CHROMA_COLLECTION)")
    args = parser.parse_args()

    load_dotenv()
    settings = Settings()
    files = args.files or settings.RAG_SOURCE_FILES
    collection = args.collection or settings.CHROMA_COLLECTION

    print("\n" + "=" * 60)
    print("📚 DOCUMENT INDEX BUILD")
    print("=" * 60)
    print(f"  Collection: {collection}")
    for path in files:
        print(f"  Source: {path}")

    indexer = DocumentIndexer(
        partial(VectorStore, collection, partial(build_chroma_client, settings)),
        ChromaDefaultEmbedder(),
        IndexState(),
        files,
        chunk_size=settings.RAG_CHUNK_SIZE,
        chunk_overlap=settings.RAG_CHUNK_OVERLAP,
    )

    try:
        count = asyncio.run(indexer.rebuild())
    except IndexingError as e:
        print(f"\n❌ {e}")
        return 1

    print(f"\n✅ Indexed {count} chunks")
    return 0


if __name__ == "__main__":
    sys.exit(main())

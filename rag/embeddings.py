"""
Text embeddings for the document index, computed with ChromaDB's default
embedding function (all-MiniLM-L6-v2 via ONNX).
"""

from typing import List, Protocol

from chromadb.utils import embedding_functions


class Embedder(Protocol):
    def __call__(self, texts: List[str]) -> List[List[float]]:
        ...


class ChromaDefaultEmbedder:
    def __init__(self):
        self._function = embedding_functions.DefaultEmbeddingFunction()

    def __call__(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []
        return [[float(x) for x in vector] for vector in self._function(texts)]

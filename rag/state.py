"""
Lifecycle of the document index.

UNINITIALIZED -> INDEXING -> READY, and READY/FAILED -> INDEXING on rebuild.
Questions are only answered in READY.
"""

import asyncio
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class IndexStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    INDEXING = "indexing"
    READY = "ready"
    FAILED = "failed"


class IndexState:
    def __init__(self):
        self.status = IndexStatus.UNINITIALIZED
        self.chunk_count = 0
        # Held by rebuilds and searches; the vector store has no locking of its own.
        self.lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self.status is IndexStatus.READY

    def _move(self, status: IndexStatus) -> None:
        logger.info(f"Document index: {self.status.value} -> {status.value}")
        self.status = status

    def start_indexing(self) -> None:
        self._move(IndexStatus.INDEXING)

    def mark_ready(self, chunk_count: int) -> None:
        self.chunk_count = chunk_count
        self._move(IndexStatus.READY)

    def mark_failed(self) -> None:
        self.chunk_count = 0
        self._move(IndexStatus.FAILED)

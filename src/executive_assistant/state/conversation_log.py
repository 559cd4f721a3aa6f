"""
In-memory conversation log.

Provides a bounded, append-only history of dispatched messages that is
safe to share between concurrent dispatches.
"""

import asyncio
from collections import deque
from typing import Deque, List

from executive_assistant.models.conversation import ConversationRecord

DEFAULT_MAX_CONVERSATIONS = 1000


class ConversationLog:
    """
    Bounded conversation history with async locking.

    Appending past capacity evicts the oldest records, so the log is a
    sliding window over the most recent dispatches.

    LAB SIMPLIFICATION: Uses an in-memory deque.
    PRODUCTION: Swap for a persistent store with the same interface.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_CONVERSATIONS):
        """
        Initialize storage and lock.

        Args:
            max_size: Maximum number of records kept.

        Raises:
            ValueError: If max_size is not positive.
        """
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._max_size = max_size
        self._records: Deque[ConversationRecord] = deque(maxlen=max_size)
        self._lock = asyncio.Lock()

    @property
    def max_size(self) -> int:
        """Maximum number of records kept."""
        return self._max_size

    def __len__(self) -> int:
        return len(self._records)

    async def append(self, record: ConversationRecord) -> None:
        """
        Append a record, evicting the oldest one when full.

        Args:
            record: Record to append.
        """
        async with self._lock:
            self._records.append(record)

    async def records(self) -> List[ConversationRecord]:
        """
        Get a snapshot of all records, oldest first.

        Returns:
            List copy of the stored records.
        """
        async with self._lock:
            return list(self._records)

    async def recent(self, limit: int) -> List[ConversationRecord]:
        """
        Get the most recent records, oldest first.

        Args:
            limit: Maximum number of records to return.

        Returns:
            Up to ``limit`` of the newest records.
        """
        if limit <= 0:
            return []
        async with self._lock:
            return list(self._records)[-limit:]

    async def clear(self) -> None:
        """Remove all records."""
        async with self._lock:
            self._records.clear()

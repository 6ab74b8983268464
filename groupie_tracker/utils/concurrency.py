"""Shared concurrency primitives.

Provides :class:`ReadWriteLock`, an asyncio readers-writer lock used by the
in-memory cache: any number of readers may hold it together, while a writer
(an insert or a full clear) holds it alone.  Waiting writers block new
readers so a steady stream of cache hits cannot starve an insert.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Readers-writer lock for coroutines sharing one event loop.

    Usage::

        lock = ReadWriteLock()

        async with lock.read():
            value = mapping.get(key)

        async with lock.write():
            mapping[key] = value
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @property
    def readers(self) -> int:
        """Number of coroutines currently holding shared access."""
        return self._readers

    @property
    def writer_active(self) -> bool:
        """``True`` while a coroutine holds exclusive access."""
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold shared access for the duration of the ``async with`` block."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._waiting_writers == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold exclusive access for the duration of the ``async with`` block."""
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and self._readers == 0
                )
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """asyncio single-writer / multi-reader lock.

    Readers share the lock. A writer waits until every reader and writer has
    left, then holds it alone. Once a writer is queued, new readers wait behind
    it so a steady stream of reads cannot starve writes.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writing(self) -> bool:
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer and not self._writers_waiting)
            self._readers += 1
        try:
            yield
        finally:
            # bookkeeping before any await; the wakeup survives cancellation
            self._readers -= 1
            if not self._readers:
                await asyncio.shield(self._wake_all())

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and not self._readers)
            except BaseException:
                # readers parked behind this writer must be woken up
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            self._writer = False
            await asyncio.shield(self._wake_all())

    async def _wake_all(self) -> None:
        async with self._cond:
            self._cond.notify_all()

"""Unit tests for the asyncio ReadWriteLock."""

from __future__ import annotations

import asyncio

import pytest

from groupie_tracker.utils.concurrency import ReadWriteLock


async def _settle() -> None:
    """Let every runnable task advance until it blocks."""
    for _ in range(20):
        await asyncio.sleep(0)


class TestReadWriteLock:
    @pytest.mark.asyncio
    async def test_readers_share_the_lock(self) -> None:
        lock = ReadWriteLock()
        release = asyncio.Event()

        async def reader() -> None:
            async with lock.read():
                await release.wait()

        tasks = [asyncio.create_task(reader()) for _ in range(3)]
        await _settle()
        assert lock.readers == 3
        assert lock.writer_active is False

        release.set()
        await asyncio.gather(*tasks)
        assert lock.readers == 0

    @pytest.mark.asyncio
    async def test_writer_excludes_readers(self) -> None:
        lock = ReadWriteLock()
        release = asyncio.Event()
        events: list[str] = []

        async def writer() -> None:
            async with lock.write():
                events.append("write-start")
                await release.wait()
                events.append("write-end")

        async def reader() -> None:
            async with lock.read():
                events.append("read")

        writer_task = asyncio.create_task(writer())
        await _settle()
        reader_task = asyncio.create_task(reader())
        await _settle()
        assert events == ["write-start"]

        release.set()
        await asyncio.gather(writer_task, reader_task)
        assert events == ["write-start", "write-end", "read"]

    @pytest.mark.asyncio
    async def test_writer_waits_for_readers_to_drain(self) -> None:
        lock = ReadWriteLock()
        release = asyncio.Event()
        events: list[str] = []

        async def reader() -> None:
            async with lock.read():
                events.append("read-start")
                await release.wait()
                events.append("read-end")

        async def writer() -> None:
            async with lock.write():
                events.append("write")

        reader_task = asyncio.create_task(reader())
        await _settle()
        writer_task = asyncio.create_task(writer())
        await _settle()
        assert events == ["read-start"]
        assert lock.writer_active is False

        release.set()
        await asyncio.gather(reader_task, writer_task)
        assert events == ["read-start", "read-end", "write"]

    @pytest.mark.asyncio
    async def test_waiting_writer_blocks_new_readers(self) -> None:
        lock = ReadWriteLock()
        release = asyncio.Event()
        events: list[str] = []

        async def first_reader() -> None:
            async with lock.read():
                await release.wait()
                events.append("first-read-end")

        async def writer() -> None:
            async with lock.write():
                events.append("write")

        async def late_reader() -> None:
            async with lock.read():
                events.append("late-read")

        tasks = [asyncio.create_task(first_reader())]
        await _settle()
        tasks.append(asyncio.create_task(writer()))
        await _settle()
        tasks.append(asyncio.create_task(late_reader()))
        await _settle()
        assert events == []

        release.set()
        await asyncio.gather(*tasks)
        assert events == ["first-read-end", "write", "late-read"]

    @pytest.mark.asyncio
    async def test_lock_released_on_exception(self) -> None:
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError):
            async with lock.write():
                raise RuntimeError("boom")

        assert lock.writer_active is False
        async with lock.read():
            assert lock.readers == 1

import asyncio

import pytest

from components.peoplestore.locks import ReadWriteLock


@pytest.mark.anyio
async def test_readers_share_the_lock():
    lock = ReadWriteLock()
    async with lock.read():
        async with lock.read():
            assert lock.readers == 2
    assert lock.readers == 0


@pytest.mark.anyio
async def test_writer_waits_for_active_reader():
    lock = ReadWriteLock()
    order = []
    reader_in = asyncio.Event()
    release = asyncio.Event()

    async def reader():
        async with lock.read():
            reader_in.set()
            await release.wait()
            order.append("read")

    async def writer():
        async with lock.write():
            assert lock.readers == 0
            order.append("write")

    r = asyncio.create_task(reader())
    await reader_in.wait()
    w = asyncio.create_task(writer())
    await asyncio.sleep(0.01)
    assert order == []
    assert not lock.writing

    release.set()
    await asyncio.gather(r, w)
    assert order == ["read", "write"]


@pytest.mark.anyio
async def test_writers_are_serialized():
    lock = ReadWriteLock()
    inside = 0
    peak = 0

    async def writer():
        nonlocal inside, peak
        async with lock.write():
            inside += 1
            peak = max(peak, inside)
            await asyncio.sleep(0)
            inside -= 1

    await asyncio.gather(*(writer() for _ in range(20)))
    assert peak == 1


@pytest.mark.anyio
async def test_queued_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order = []
    first_in = asyncio.Event()
    release = asyncio.Event()

    async def first_reader():
        async with lock.read():
            first_in.set()
            await release.wait()
            order.append("r1")

    async def writer():
        async with lock.write():
            order.append("w")

    async def late_reader():
        async with lock.read():
            order.append("r2")

    t1 = asyncio.create_task(first_reader())
    await first_in.wait()
    t2 = asyncio.create_task(writer())
    await asyncio.sleep(0.01)
    t3 = asyncio.create_task(late_reader())
    await asyncio.sleep(0.01)
    assert order == []

    release.set()
    await asyncio.gather(t1, t2, t3)
    assert order == ["r1", "w", "r2"]


@pytest.mark.anyio
async def test_cancelled_writer_lets_waiting_readers_in():
    lock = ReadWriteLock()
    first_in = asyncio.Event()
    release = asyncio.Event()
    late_in = asyncio.Event()

    async def first_reader():
        async with lock.read():
            first_in.set()
            await release.wait()

    async def writer():
        async with lock.write():
            pass

    async def late_reader():
        async with lock.read():
            late_in.set()

    t1 = asyncio.create_task(first_reader())
    await first_in.wait()
    w = asyncio.create_task(writer())
    await asyncio.sleep(0.01)
    t3 = asyncio.create_task(late_reader())
    await asyncio.sleep(0.01)
    assert not late_in.is_set()

    w.cancel()
    with pytest.raises(asyncio.CancelledError):
        await w
    await asyncio.wait_for(late_in.wait(), timeout=1)

    release.set()
    await asyncio.gather(t1, t3)
    assert lock.readers == 0 and not lock.writing


@pytest.mark.anyio
async def test_reader_cancelled_while_releasing_does_not_leak():
    lock = ReadWriteLock()
    inside = asyncio.Event()
    release = asyncio.Event()

    async def reader():
        async with lock.read():
            inside.set()
            await release.wait()

    async def writer():
        async with lock.write():
            assert lock.readers == 0

    t = asyncio.create_task(reader())
    await inside.wait()
    # keep the condition busy so the reader parks on its way out
    await lock._cond.acquire()
    release.set()
    await asyncio.sleep(0.01)
    t.cancel()
    with pytest.raises(asyncio.CancelledError):
        await t
    lock._cond.release()

    assert lock.readers == 0
    await asyncio.wait_for(writer(), timeout=1)


@pytest.mark.anyio
async def test_writer_cancelled_while_releasing_does_not_leak():
    lock = ReadWriteLock()
    inside = asyncio.Event()
    release = asyncio.Event()
    late_in = asyncio.Event()

    async def writer():
        async with lock.write():
            inside.set()
            await release.wait()

    async def late_reader():
        async with lock.read():
            late_in.set()

    w = asyncio.create_task(writer())
    await inside.wait()
    r = asyncio.create_task(late_reader())
    await asyncio.sleep(0.01)
    assert not late_in.is_set()

    await lock._cond.acquire()
    release.set()
    await asyncio.sleep(0.01)
    w.cancel()
    with pytest.raises(asyncio.CancelledError):
        await w
    lock._cond.release()

    assert not lock.writing
    await asyncio.wait_for(late_in.wait(), timeout=1)
    await r


def test_lock_built_outside_the_running_loop():
    # the app builds its store at import time, before the server loop exists
    lock = ReadWriteLock()
    order = []

    async def main():
        reader_in = asyncio.Event()
        release = asyncio.Event()

        async def reader():
            async with lock.read():
                reader_in.set()
                await release.wait()
                order.append("read")

        async def writer():
            await reader_in.wait()
            async with lock.write():
                order.append("write")

        tasks = [asyncio.create_task(reader()), asyncio.create_task(writer())]
        await reader_in.wait()
        await asyncio.sleep(0.01)
        release.set()
        await asyncio.gather(*tasks)

    asyncio.run(main())
    assert order == ["read", "write"]

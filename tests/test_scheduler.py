import asyncio

import pytest

from core.scheduler import AsyncioScheduler


def test_call_later_fires_on_running_loop() -> None:
    fired = []

    async def main() -> None:
        AsyncioScheduler().call_later(0.01, lambda: fired.append("tick"))
        await asyncio.sleep(0.05)

    asyncio.run(main())
    assert fired == ["tick"]


def test_cancelled_call_never_fires() -> None:
    fired = []

    async def main() -> None:
        handle = AsyncioScheduler().call_later(0.01, lambda: fired.append("tick"))
        handle.cancel()
        await asyncio.sleep(0.05)

    asyncio.run(main())
    assert fired == []


def test_explicit_loop_is_used() -> None:
    loop = asyncio.new_event_loop()
    try:
        fired = []
        AsyncioScheduler(loop).call_later(0, lambda: fired.append("tick"))
        loop.run_until_complete(asyncio.sleep(0.01))
        assert fired == ["tick"]
    finally:
        loop.close()


def test_call_later_needs_a_running_loop() -> None:
    with pytest.raises(RuntimeError):
        AsyncioScheduler().call_later(0, lambda: None)

import asyncio
from typing import List

import pytest

from glyph_mask.scheduler import AsyncioScheduler, PollingScheduler
from tests.test_utils import FakeClock


def test_fires_once_per_interval() -> None:
    clock = FakeClock()
    scheduler = PollingScheduler(clock)
    calls: List[float] = []
    scheduler.call_repeatedly(20, lambda: calls.append(clock()))

    clock.advance(19)
    assert scheduler.poll() == 0
    clock.advance(1)
    assert scheduler.poll() == 1
    clock.advance(20)
    assert scheduler.poll() == 1
    assert len(calls) == 2


def test_no_catch_up_burst_after_stall() -> None:
    clock = FakeClock()
    scheduler = PollingScheduler(clock)
    calls: List[int] = []
    scheduler.call_repeatedly(20, lambda: calls.append(1))

    clock.advance(1_000)
    assert scheduler.poll() == 1
    assert scheduler.poll() == 0
    # Next boundary stays on the initial 20 ms grid.
    clock.advance(20)
    assert scheduler.poll() == 1


def test_cancel_is_final_and_idempotent() -> None:
    clock = FakeClock()
    scheduler = PollingScheduler(clock)
    calls: List[int] = []
    cancel = scheduler.call_repeatedly(20, lambda: calls.append(1))
    cancel()
    cancel()
    clock.advance(100)
    assert scheduler.poll() == 0
    assert calls == []
    assert scheduler.active_count == 0


def test_cancel_from_earlier_callback_in_same_poll() -> None:
    clock = FakeClock()
    scheduler = PollingScheduler(clock)
    calls: List[str] = []
    cancel_second = None

    def first() -> None:
        calls.append("first")
        assert cancel_second is not None
        cancel_second()

    scheduler.call_repeatedly(20, first)
    cancel_second = scheduler.call_repeatedly(20, lambda: calls.append("second"))

    clock.advance(20)
    scheduler.poll()
    assert calls == ["first"]


def test_timer_armed_during_poll_waits_full_interval() -> None:
    clock = FakeClock()
    scheduler = PollingScheduler(clock)
    calls: List[str] = []

    def rearm() -> None:
        calls.append("outer")
        scheduler.call_repeatedly(20, lambda: calls.append("inner"))

    cancel = scheduler.call_repeatedly(20, rearm)
    clock.advance(20)
    scheduler.poll()
    cancel()
    assert calls == ["outer"]
    clock.advance(20)
    scheduler.poll()
    assert calls == ["outer", "inner"]


def test_cancel_all() -> None:
    clock = FakeClock()
    scheduler = PollingScheduler(clock)
    scheduler.call_repeatedly(20, lambda: None)
    scheduler.call_repeatedly(50, lambda: None)
    assert scheduler.active_count == 2
    scheduler.cancel_all()
    assert scheduler.active_count == 0


@pytest.mark.parametrize("interval", [0, -5])
def test_rejects_non_positive_interval(interval: float) -> None:
    with pytest.raises(ValueError):
        PollingScheduler(FakeClock()).call_repeatedly(interval, lambda: None)


def test_callback_errors_propagate() -> None:
    clock = FakeClock()
    scheduler = PollingScheduler(clock)

    def boom() -> None:
        raise RuntimeError("boom")

    scheduler.call_repeatedly(20, boom)
    clock.advance(20)
    with pytest.raises(RuntimeError):
        scheduler.poll()


def test_asyncio_scheduler_ticks_and_cancels() -> None:
    async def scenario() -> List[int]:
        scheduler = AsyncioScheduler()
        calls: List[int] = []
        cancel = scheduler.call_repeatedly(5, lambda: calls.append(1))
        await asyncio.sleep(0.06)
        cancel()
        seen = len(calls)
        await asyncio.sleep(0.03)
        return [seen, len(calls)]

    seen, after = asyncio.run(scenario())
    assert seen >= 2
    assert after == seen


def test_asyncio_scheduler_cancel_before_first_tick() -> None:
    async def scenario() -> int:
        scheduler = AsyncioScheduler(asyncio.get_running_loop())
        calls: List[int] = []
        cancel = scheduler.call_repeatedly(5, lambda: calls.append(1))
        cancel()
        await asyncio.sleep(0.03)
        return len(calls)

    assert asyncio.run(scenario()) == 0

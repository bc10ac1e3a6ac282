import pytest
from speechbubble.core.timers import TimerScheduler

def test_timer_fires_every_interval(scheduler):
    fired = []
    scheduler.every(100, lambda: fired.append(scheduler.now_ms))

    scheduler.advance(99)
    assert fired == []

    scheduler.advance(1)
    assert fired == [100]

    scheduler.advance(250)
    assert fired == [100, 200, 300]
    assert scheduler.now_ms == 350

def test_update_takes_seconds(scheduler):
    fired = []
    scheduler.every(100, lambda: fired.append(True))

    scheduler.update(0.25)

    assert len(fired) == 2

def test_cancel_stops_firing(scheduler):
    fired = []
    handle = scheduler.every(50, lambda: fired.append(True))

    scheduler.advance(50)
    handle.cancel()
    scheduler.advance(500)

    assert len(fired) == 1
    assert not handle.active
    assert scheduler.active_count == 0

def test_cancel_twice_is_noop(scheduler):
    handle = scheduler.every(50, lambda: None)
    scheduler.cancel(handle)
    scheduler.cancel(handle)
    handle.cancel()
    assert scheduler.active_count == 0

def test_callback_can_cancel_itself(scheduler):
    fired = []

    def once():
        fired.append(True)
        handle.cancel()

    handle = scheduler.every(10, once)
    scheduler.advance(100)

    assert fired == [True]

def test_timers_fire_in_time_order(scheduler):
    order = []
    scheduler.every(30, lambda: order.append("slow"))
    scheduler.every(20, lambda: order.append("fast"))

    scheduler.advance(60)

    # fast@20, slow@30, fast@40, slow@60 then fast@60 (slow registered first)
    assert order == ["fast", "slow", "fast", "slow", "fast"]

def test_non_positive_interval_rejected(scheduler):
    with pytest.raises(ValueError):
        scheduler.every(0, lambda: None)

def test_callback_error_is_logged_and_other_timers_continue(scheduler, caplog):
    fired = []

    def broken():
        raise RuntimeError("boom")

    scheduler.every(10, broken)
    scheduler.every(10, lambda: fired.append(True))

    scheduler.advance(10)

    assert fired == [True]
    assert "Error in timer callback" in caplog.text

def test_clear_cancels_everything(scheduler):
    handles = [scheduler.every(10, lambda: None) for _ in range(3)]
    scheduler.clear()

    assert scheduler.active_count == 0
    assert not any(h.active for h in handles)

import pytest

from bomby_explody.timer import Timer, TimerMode


def test_from_seconds_starts_empty():
    timer = Timer.from_seconds(2.0, TimerMode.ONCE)
    assert timer.duration == 2.0
    assert timer.elapsed == 0.0
    assert not timer.finished
    assert not timer.just_finished
    assert timer.remaining_secs() == 2.0


def test_partial_tick_does_not_finish():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    timer.tick(0.25)
    assert not timer.finished
    assert not timer.just_finished
    assert timer.fraction() == pytest.approx(0.25)


def test_once_timer_finishes_and_clamps():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    timer.tick(3.0)
    assert timer.finished
    assert timer.just_finished
    assert timer.elapsed == timer.duration
    assert timer.remaining_secs() == 0.0


def test_once_timer_just_finished_only_once():
    timer = Timer.from_seconds(0.5, TimerMode.ONCE)
    timer.tick(0.5)
    assert timer.just_finished
    timer.tick(0.5)
    assert timer.finished
    assert not timer.just_finished


def test_many_small_ticks_add_up_exactly():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    for _ in range(9):
        timer.tick(0.1)
        assert not timer.finished
    timer.tick(0.1)
    assert timer.just_finished


def test_repeating_timer_wraps():
    timer = Timer.from_seconds(1.0, TimerMode.REPEATING)
    timer.tick(2.5)
    assert timer.just_finished
    assert timer.times_finished_this_tick == 2
    assert timer.elapsed == pytest.approx(0.5)


def test_repeating_timer_clears_finished_next_tick():
    timer = Timer.from_seconds(1.0, TimerMode.REPEATING)
    timer.tick(1.0)
    assert timer.just_finished
    timer.tick(0.1)
    assert not timer.finished
    assert not timer.just_finished


@pytest.mark.parametrize("step", [0.0, 0.1, 0.3, 0.7, 1.0])
def test_fraction_and_remaining_sum_to_one(step):
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    timer.tick(step)
    assert timer.fraction() + timer.fraction_remaining() == pytest.approx(1.0)
    assert timer.elapsed + timer.remaining_secs() == pytest.approx(timer.duration)


def test_zero_duration_fraction_is_full():
    timer = Timer.from_seconds(0.0, TimerMode.ONCE)
    assert timer.fraction() == 1.0
    timer.tick(0.0)
    assert timer.just_finished


def test_reset_starts_over():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    timer.tick(1.0)
    timer.reset()
    assert timer == Timer.from_seconds(1.0, TimerMode.ONCE)
    assert not timer.finished


def test_tick_returns_timer():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    assert timer.tick(0.1) is timer


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        Timer.from_seconds(-1.0, TimerMode.ONCE)


def test_negative_delta_rejected():
    timer = Timer.from_seconds(1.0, TimerMode.ONCE)
    with pytest.raises(ValueError):
        timer.tick(-0.1)
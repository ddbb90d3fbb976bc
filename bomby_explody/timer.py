"""Countdown timers driven by frame deltas."""

from __future__ import annotations

import enum

_NANOS_PER_SECOND = 1_000_000_000


def _to_nanos(seconds: float) -> int:
    if seconds != seconds or seconds in (float("inf"), float("-inf")):
        raise ValueError(f"duration must be finite, got {seconds!r}")
    if seconds < 0:
        raise ValueError(f"duration must not be negative, got {seconds!r}")
    return round(seconds * _NANOS_PER_SECOND)


class TimerMode(enum.Enum):
    """Whether a timer stops when it finishes or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """A timer that counts up to a fixed duration as it is ticked.

    Time is kept in whole nanoseconds so that repeated ticks add up exactly.
    """

    __slots__ = ("_duration_ns", "_elapsed_ns", "mode", "_finished", "_times_finished")

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        self._duration_ns = _to_nanos(duration)
        self._elapsed_ns = 0
        self.mode = mode
        self._finished = False
        self._times_finished = 0

    @classmethod
    def from_seconds(cls, seconds: float, mode: TimerMode = TimerMode.ONCE) -> Timer:
        """Create a timer lasting ``seconds``."""
        return cls(seconds, mode)

    @property
    def duration(self) -> float:
        return self._duration_ns / _NANOS_PER_SECOND

    @property
    def elapsed(self) -> float:
        return self._elapsed_ns / _NANOS_PER_SECOND

    @property
    def finished(self) -> bool:
        """True once the timer has reached its duration (on this tick, if repeating)."""
        return self._finished

    @property
    def just_finished(self) -> bool:
        """True only during the tick in which the timer reached its duration."""
        return self._times_finished > 0

    @property
    def times_finished_this_tick(self) -> int:
        return self._times_finished

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds and return it."""
        delta_ns = _to_nanos(delta)
        if self.mode is not TimerMode.REPEATING and self._finished:
            self._times_finished = 0
            return self

        self._elapsed_ns += delta_ns
        self._finished = self._elapsed_ns >= self._duration_ns
        if not self._finished:
            self._times_finished = 0
        elif self.mode is TimerMode.REPEATING:
            if self._duration_ns == 0:
                self._times_finished = 1
                self._elapsed_ns = 0
            else:
                self._times_finished, self._elapsed_ns = divmod(
                    self._elapsed_ns, self._duration_ns
                )
        else:
            self._times_finished = 1
            self._elapsed_ns = self._duration_ns
        return self

    def reset(self) -> None:
        """Start the timer over from zero."""
        self._elapsed_ns = 0
        self._finished = False
        self._times_finished = 0

    def fraction(self) -> float:
        """Elapsed share of the duration, from 0.0 to 1.0."""
        if self._duration_ns == 0:
            return 1.0
        return self._elapsed_ns / self._duration_ns

    def fraction_remaining(self) -> float:
        """Remaining share of the duration, from 1.0 down to 0.0."""
        return 1.0 - self.fraction()

    def remaining_secs(self) -> float:
        """Seconds left until the timer finishes."""
        return (self._duration_ns - self._elapsed_ns) / _NANOS_PER_SECOND

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timer):
            return NotImplemented
        return (
            self._duration_ns == other._duration_ns
            and self._elapsed_ns == other._elapsed_ns
            and self.mode is other.mode
            and self._finished == other._finished
            and self._times_finished == other._times_finished
        )

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration!r}, elapsed={self.elapsed!r}, "
            f"mode={self.mode.name}, finished={self._finished})"
        )
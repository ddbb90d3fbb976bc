"""Shared game data: vectors, animation and movement settings, health and events."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .timer import Timer, TimerMode

SCREEN_WIDTH = 1280.0
SCREEN_HEIGHT = 720.0


def _rem_euclid(value: float, divisor: float) -> float:
    remainder = math.fmod(value, divisor)
    if remainder < 0:
        remainder += abs(divisor)
    return remainder


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the unit vector in the same direction; the zero vector has none."""
        length = self.length()
        if length == 0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return self / length

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Linear interpolation from this vector (t=0) to ``other`` (t=1)."""
        return self + (other - self) * t

    def rem_euclid(self, other: Vec2) -> Vec2:
        """Component-wise Euclidean remainder, always non-negative."""
        return Vec2(_rem_euclid(self.x, other.x), _rem_euclid(self.y, other.y))


Vec2.ZERO = Vec2(0.0, 0.0)


@dataclass
class AnimationConfig:
    """A sprite-sheet animation: ``frames`` cells starting at ``index``, played at ``fps``."""

    index: int
    frames: int
    fps: int
    timer: Timer = field(init=False)

    def __post_init__(self) -> None:
        if self.frames < 1:
            raise ValueError(f"an animation needs at least one frame, got {self.frames}")
        self.timer = self.timer_from_fps(self.fps)

    @staticmethod
    def timer_from_fps(fps: int) -> Timer:
        """A one-shot timer lasting one frame at ``fps``."""
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        return Timer.from_seconds(1.0 / fps, TimerMode.ONCE)

    def timer_from_self_fps(self) -> Timer:
        return self.timer_from_fps(self.fps)

    def advance(self, delta: float, index: int) -> int:
        """Tick the frame timer and return the atlas index to show next."""
        self.timer.tick(delta)
        if not self.timer.just_finished:
            return index
        self.timer = self.timer_from_self_fps()
        if index == self.index + self.frames - 1:
            return self.index
        return index + 1


@dataclass
class MovementConfig:
    """Straight-line movement: a unit ``direction`` and a ``speed`` in units per second."""

    direction: Vec2
    speed: float

    @classmethod
    def from_vec2(cls, vec: Vec2) -> MovementConfig:
        """Split a velocity into its direction and its length."""
        return cls(direction=vec.normalize(), speed=vec.length())

    def with_speed_as_screen_width_percent(self, value: float) -> MovementConfig:
        return dataclasses.replace(self, speed=SCREEN_WIDTH * value)

    def with_speed_as_screen_height_percent(self, value: float) -> MovementConfig:
        return dataclasses.replace(self, speed=SCREEN_HEIGHT * value)


@dataclass
class Health:
    current: int


@dataclass(frozen=True)
class BlastEvent:
    """A bomb went off at ``location``, reaching ``range`` units."""

    source: Any
    location: Vec2
    range: float


@dataclass(frozen=True)
class DamageEvent:
    """``target`` takes ``amount`` points of damage."""

    target: Any
    amount: int
"""The walking player character: its sprite animation and movement controller."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar

from .components import Vec2
from .timer import Timer, TimerMode

PLAYER_IMAGE = "images/ducky.png"
PLAYER_TILE_SIZE = 32
PLAYER_ATLAS_COLUMNS = 6
PLAYER_ATLAS_ROWS = 2
PLAYER_SCALE = 8.0
PLAYER_MAX_SPEED = 400.0
STEP_SOUNDS = (
    "audio/sound_effects/step1.ogg",
    "audio/sound_effects/step2.ogg",
    "audio/sound_effects/step3.ogg",
    "audio/sound_effects/step4.ogg",
)
STEP_FRAMES = (2, 5)


class PlayerAnimationState(enum.Enum):
    IDLING = "idling"
    WALKING = "walking"


@dataclass
class PlayerAnimation:
    """Tracks which frame of the player's sprite sheet to show.

    The sheet holds the idle frames on its first row and the walking frames
    on its second.
    """

    IDLE_FRAMES: ClassVar[int] = 2
    IDLE_INTERVAL: ClassVar[float] = 0.5
    WALKING_FRAMES: ClassVar[int] = 6
    WALKING_INTERVAL: ClassVar[float] = 0.05

    state: PlayerAnimationState = PlayerAnimationState.IDLING
    frame: int = 0
    timer: Timer = field(init=False)

    def __post_init__(self) -> None:
        self.timer = Timer.from_seconds(self._interval(self.state), TimerMode.REPEATING)

    @classmethod
    def _interval(cls, state: PlayerAnimationState) -> float:
        if state is PlayerAnimationState.IDLING:
            return cls.IDLE_INTERVAL
        return cls.WALKING_INTERVAL

    @classmethod
    def _frames(cls, state: PlayerAnimationState) -> int:
        if state is PlayerAnimationState.IDLING:
            return cls.IDLE_FRAMES
        return cls.WALKING_FRAMES

    def update_timer(self, delta: float) -> None:
        """Tick the frame timer, stepping to the next frame when it fires."""
        self.timer.tick(delta)
        if not self.timer.finished:
            return
        self.frame = (self.frame + 1) % self._frames(self.state)

    def update_state(self, state: PlayerAnimationState) -> None:
        """Switch to ``state``, restarting the animation, unless already in it."""
        if self.state is not state:
            self.state = state
            self.frame = 0
            self.timer = Timer.from_seconds(self._interval(state), TimerMode.REPEATING)

    def changed(self) -> bool:
        """Whether the frame changed on the last tick."""
        return self.timer.finished

    def atlas_index(self) -> int:
        """Index of the current frame in the sprite sheet."""
        if self.state is PlayerAnimationState.IDLING:
            return self.frame
        return PLAYER_ATLAS_COLUMNS + self.frame

    @property
    def step_due(self) -> bool:
        """Whether a footstep sound belongs to the frame just shown."""
        return (
            self.state is PlayerAnimationState.WALKING
            and self.changed()
            and self.frame in STEP_FRAMES
        )


@dataclass
class MovementController:
    """Moves a character along its intended direction at up to ``max_speed`` units per second."""

    intent: Vec2 = Vec2.ZERO
    max_speed: float = PLAYER_MAX_SPEED
    flip_x: bool = False

    @property
    def animation_state(self) -> PlayerAnimationState:
        """Idle while there is no intent to move, walking otherwise."""
        if self.intent == Vec2.ZERO:
            return PlayerAnimationState.IDLING
        return PlayerAnimationState.WALKING

    def apply(self, position: Vec2, delta: float) -> Vec2:
        """Return ``position`` moved for ``delta`` seconds, then clear the intent."""
        if self.intent.x != 0.0:
            self.flip_x = self.intent.x < 0.0
        velocity = self.intent * self.max_speed
        self.intent = Vec2.ZERO
        return position + velocity * delta
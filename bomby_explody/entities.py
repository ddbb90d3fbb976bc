"""Bombs, enemies and explosions, and how each of them changes from frame to frame."""

from __future__ import annotations

from dataclasses import dataclass, field

from .components import (
    SCREEN_WIDTH,
    AnimationConfig,
    Health,
    MovementConfig,
    Vec2,
)
from .timer import Timer

BLAST_RANGE = 100.0
CHAIN_DELAY = 0.25
BOMB_TRAVEL_SECONDS = 0.5
HIT_FLASH_SECONDS = 0.5
DEATH_FADE_SECONDS = 0.5
EXPLOSION_SECONDS = 0.25
ENEMY_HEALTH = 10
SCREEN_WRAP_MARGIN = 256.0

BOMB_SIZE = 64.0
ENEMY_SIZE = 30.0 * 3.0
EXPLOSION_SIZE = 96.0

BOMB_IMAGE = "images/vfx/Lavaball.png"
BOMB_CHARGE_IMAGE = "images/vfx/Charge_Fire.png"
ENEMY_IMAGE = "images/enemies.png"
EXPLOSION_IMAGE = "images/vfx/Fire_Explosion.png"

Color = tuple[float, float, float, float]
WHITE: Color = (1.0, 1.0, 1.0, 1.0)
RED: Color = (1.0, 0.0, 0.0, 1.0)


def apply_movement(position: Vec2, config: MovementConfig, delta: float) -> Vec2:
    """Move ``position`` along ``config`` for ``delta`` seconds."""
    return position + config.direction * (delta * config.speed)


def screen_wrap(position: Vec2, window_size: Vec2) -> Vec2:
    """Wrap ``position`` around a window enlarged by a margin, centred on the origin."""
    size = Vec2(window_size.x + SCREEN_WRAP_MARGIN, window_size.y + SCREEN_WRAP_MARGIN)
    half_size = size / 2.0
    return (position + half_size).rem_euclid(size) - half_size


@dataclass(eq=False)
class Bomb:
    """A bomb that flies to its target, burns its fuse and then explodes."""

    position: Vec2
    fuse: Timer
    target: Vec2 | None = None
    travel: Timer = field(default_factory=lambda: Timer.from_seconds(BOMB_TRAVEL_SECONDS))
    animation: AnimationConfig = field(default_factory=lambda: AnimationConfig(0, 8, 6))
    atlas_index: int = 0
    will_explode: Timer | None = None
    exploding: bool = False
    size: float = BOMB_SIZE

    @property
    def armed(self) -> bool:
        """True while the bomb has neither been set off nor begun exploding."""
        return not self.exploding and self.will_explode is None

    def mark_for_explode(self, timeout: float) -> None:
        """Set the bomb to explode after ``timeout`` seconds."""
        self.will_explode = Timer.from_seconds(timeout)

    def update(self, delta: float) -> bool:
        """Advance the bomb by ``delta`` seconds; return True once it is exploding."""
        if not self.exploding:
            if self.will_explode is not None:
                if self.will_explode.tick(delta).just_finished:
                    self.exploding = True
            elif self.fuse.tick(delta).just_finished:
                self.mark_for_explode(CHAIN_DELAY)

        if self.target is not None:
            self.travel.tick(delta)
            if self.travel.just_finished:
                self.target = None
            else:
                self.position = self.position.lerp(self.target, self.travel.fraction())

        self.atlas_index = self.animation.advance(delta, self.atlas_index)
        return self.exploding


@dataclass(eq=False)
class Enemy:
    """An enemy that walks across the screen, flashes when hit and fades when killed."""

    position: Vec2
    movement: MovementConfig
    animation: AnimationConfig
    atlas_index: int
    health: Health = field(default_factory=lambda: Health(ENEMY_HEALTH))
    moving: bool = True
    damaged: Timer | None = None
    dead: Timer | None = None
    color: Color = WHITE
    size: float = ENEMY_SIZE

    @property
    def is_dead(self) -> bool:
        return self.dead is not None

    def apply_damage(self, amount: int) -> None:
        """Take ``amount`` damage, starting the death fade or the hit flash."""
        self.health.current -= amount
        if self.health.current <= 0:
            if self.dead is None:
                self.dead = Timer.from_seconds(DEATH_FADE_SECONDS)
        elif self.damaged is None:
            self.damaged = Timer.from_seconds(HIT_FLASH_SECONDS)

    def update(self, delta: float, window_size: Vec2) -> bool:
        """Advance the enemy by ``delta`` seconds; return False once it should be removed."""
        if self.moving:
            self.position = apply_movement(self.position, self.movement, delta)
        self.position = screen_wrap(self.position, window_size)

        if self.dead is not None:
            self.moving = False
            self.dead.tick(delta)
            self.color = (1.0, 1.0, 1.0, self.dead.fraction_remaining())
            if self.dead.just_finished:
                return False
        elif self.damaged is not None:
            self.moving = False
            self.damaged.tick(delta)
            remaining = int(self.damaged.remaining_secs() * 10.0)
            self.color = RED if remaining % 2 == 0 else WHITE
            if self.damaged.just_finished:
                self.color = WHITE
                self.damaged = None
                self.moving = True

        self.atlas_index = self.animation.advance(delta, self.atlas_index)
        return True


@dataclass(eq=False)
class Explosion:
    """A short-lived explosion effect."""

    position: Vec2
    timer: Timer = field(default_factory=lambda: Timer.from_seconds(EXPLOSION_SECONDS))
    animation: AnimationConfig = field(default_factory=lambda: AnimationConfig(0, 6, 24))
    atlas_index: int = 0
    size: float = EXPLOSION_SIZE

    def update(self, delta: float) -> bool:
        """Advance the effect; return False once it has run its course."""
        if self.timer.tick(delta).just_finished:
            return False
        self.atlas_index = self.animation.advance(delta, self.atlas_index)
        return True


def create_bomb(position: Vec2, timeout: float) -> Bomb:
    """A bomb thrown from the left edge towards ``position``, exploding after ``timeout``."""
    return Bomb(
        position=Vec2(-SCREEN_WIDTH / 2.0, 0.0),
        fuse=Timer.from_seconds(timeout),
        target=position,
    )


def create_enemy(index: int, position: Vec2, movement: Vec2, speed_percent: float) -> Enemy:
    """An enemy at ``position`` heading along ``movement``, speed given as a share of screen width."""
    return Enemy(
        position=position,
        movement=MovementConfig.from_vec2(movement).with_speed_as_screen_width_percent(
            speed_percent
        ),
        animation=AnimationConfig(index, 4, 4),
        atlas_index=index,
    )


def create_explosion(location: Vec2) -> Explosion:
    return Explosion(position=location)
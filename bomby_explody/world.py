"""The gameplay level: bombs, enemies, explosions and the enemy spawner."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .components import SCREEN_HEIGHT, SCREEN_WIDTH, BlastEvent, Vec2
from .entities import (
    BLAST_RANGE,
    CHAIN_DELAY,
    Bomb,
    Enemy,
    Explosion,
    create_bomb,
    create_enemy,
    create_explosion,
)
from .timer import Timer, TimerMode

BOMB_FUSE_SECONDS = 2.75
BOMB_VOLUME = 0.15
BOMB_SOUNDS = (
    "audio/sound_effects/bomb_1.ogg",
    "audio/sound_effects/bomb_2.ogg",
    "audio/sound_effects/bomb_3.ogg",
    "audio/sound_effects/bomb_4.ogg",
)
LEVEL_MUSIC = "audio/music/Fluffing A Duck.ogg"

SPAWN_MARGIN = 64.0
MIN_ENEMY_SPEED = 0.1
MAX_ENEMY_SPEED = 0.2


@dataclass
class EnemySpawner:
    """Spawns an enemy at the right edge every second while there is room for one."""

    max: int = 5
    timer: Timer = field(
        default_factory=lambda: Timer.from_seconds(1.0, TimerMode.REPEATING)
    )

    def update(self, delta: float, enemy_count: int, rng: random.Random) -> Enemy | None:
        """Tick the spawner and return a new enemy when one is due."""
        # The spawner counts itself among the enemies, so it stops one short of ``max + 1``.
        if enemy_count + 1 > self.max:
            return None
        if not self.timer.tick(delta).just_finished:
            return None
        half_height = SCREEN_HEIGHT / 2.0 - SPAWN_MARGIN
        speed = rng.uniform(MIN_ENEMY_SPEED, MAX_ENEMY_SPEED)
        y_position = rng.uniform(-half_height, half_height)
        return create_enemy(
            0,
            Vec2(SCREEN_WIDTH / 2.0, y_position),
            Vec2(-1.0, 0.0),
            speed,
        )


class GameWorld:
    """Everything that lives in the gameplay level, advanced one frame at a time."""

    def __init__(
        self,
        window_size: Vec2 | None = None,
        rng: random.Random | None = None,
        spawner: EnemySpawner | None = None,
    ) -> None:
        self.window_size = window_size if window_size is not None else Vec2(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.rng = rng if rng is not None else random.Random()
        self.spawner = spawner if spawner is not None else EnemySpawner()
        self.music = LEVEL_MUSIC
        self.bombs: list[Bomb] = []
        self.enemies: list[Enemy] = []
        self.explosions: list[Explosion] = []
        self.sounds: list[tuple[str, float]] = []
        self._blasts: list[BlastEvent] = []

    def place_bomb(self, position: Vec2) -> Bomb:
        """Throw a bomb towards ``position`` and return it."""
        bomb = create_bomb(position, BOMB_FUSE_SECONDS)
        self.bombs.append(bomb)
        return bomb

    def update(self, delta: float) -> None:
        """Advance the level by ``delta`` seconds."""
        self.explosions = [e for e in self.explosions if e.update(delta)]
        detonating = [bomb for bomb in self.bombs if bomb.update(delta)]

        blasts, self._blasts = self._blasts, []
        for blast in blasts:
            self._chain(blast)
            self._damage(blast)

        for bomb in detonating:
            self._detonate(bomb)

        self.enemies = [e for e in self.enemies if e.update(delta, self.window_size)]
        spawned = self.spawner.update(delta, len(self.enemies), self.rng)
        if spawned is not None:
            self.enemies.append(spawned)

    def _chain(self, blast: BlastEvent) -> None:
        for bomb in self.bombs:
            if bomb is blast.source or not bomb.armed:
                continue
            if blast.location.distance(bomb.position) < blast.range:
                bomb.mark_for_explode(CHAIN_DELAY)

    def _damage(self, blast: BlastEvent) -> None:
        for enemy in self.enemies:
            if not enemy.is_dead and enemy.position.distance(blast.location) <= blast.range:
                enemy.apply_damage(1)

    def _detonate(self, bomb: Bomb) -> None:
        self.bombs.remove(bomb)
        self.explosions.append(create_explosion(bomb.position))
        self.sounds.append((self.rng.choice(BOMB_SOUNDS), BOMB_VOLUME))
        self._blasts.append(BlastEvent(source=bomb, location=bomb.position, range=BLAST_RANGE))
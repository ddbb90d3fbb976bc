"""The game application: window, input, audio, drawing and the main loop."""

from __future__ import annotations

import argparse
import logging
import random
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import pygame

from . import theme
from .components import SCREEN_HEIGHT, SCREEN_WIDTH, Vec2
from .menus import (
    ASSET_CREDITS,
    CREATED_BY,
    KEY_ESCAPE,
    KEY_PAUSE,
    JustifySelf,
    Menu,
    Navigator,
    grid_cells,
)
from .screens import SPLASH_BACKGROUND_COLOR, AssetsState, Screen
from .world import GameWorld

logger = logging.getLogger(__name__)

TITLE = "Bomby Explody"
TOGGLE_KEY = pygame.K_BACKQUOTE
FRAMES_PER_SECOND = 60

PAUSE_OVERLAY = (0.0, 0.0, 0.0, 0.8)
ENEMY_BASE = (0.35, 0.75, 0.35)
BOMB_COLOR = (1.0, 0.45, 0.1, 1.0)
EXPLOSION_COLOR = (1.0, 0.85, 0.2, 0.9)
DEBUG_COLOR = (1.0, 0.0, 1.0)

HEADER_HEIGHT = 48.0
LABEL_HEIGHT = 30.0
GRID_ROW_HEIGHT = 30.0
GRID_COLUMN_GAP = 30.0
VOLUME_PADDING = 10.0
VOLUME_LABEL_WIDTH = 70.0

_KEYS = {pygame.K_ESCAPE: KEY_ESCAPE, pygame.K_p: KEY_PAUSE}


@dataclass(frozen=True)
class _Text:
    text: str
    size: int
    color: theme.Color
    x: float
    y: float
    anchor: str = "center"


def _screen_to_world(pos: Sequence[float], window_size: Vec2) -> Vec2:
    """Window pixels (y down, origin top-left) to world units (y up, origin centre)."""
    return Vec2(pos[0] - window_size.x / 2.0, window_size.y / 2.0 - pos[1])


def _world_to_screen(position: Vec2, window_size: Vec2) -> tuple[float, float]:
    return (position.x + window_size.x / 2.0, window_size.y / 2.0 - position.y)


class _Audio:
    """Plays sounds and music from an asset directory, if there is one and a mixer."""

    def __init__(self, asset_dir: Path | None) -> None:
        self.asset_dir = asset_dir
        self.current_music: str | None = None
        self._sounds: dict[str, pygame.mixer.Sound] = {}

    @property
    def enabled(self) -> bool:
        return self.asset_dir is not None and bool(pygame.mixer.get_init())

    def play(self, path: str, volume: float) -> None:
        if not self.enabled:
            return
        sound = self._sounds.get(path)
        if sound is None:
            try:
                sound = pygame.mixer.Sound(str(self.asset_dir / path))
            except (pygame.error, FileNotFoundError) as exc:
                logger.warning("cannot load sound %s: %s", path, exc)
                return
            self._sounds[path] = sound
        sound.set_volume(min(volume, 1.0))
        sound.play()

    def set_music(self, path: str | None, volume: float) -> None:
        if not self.enabled:
            self.current_music = path
            return
        if path != self.current_music:
            pygame.mixer.music.stop()
            self.current_music = path
            if path is not None:
                try:
                    pygame.mixer.music.load(str(self.asset_dir / path))
                    pygame.mixer.music.play(-1)
                except (pygame.error, FileNotFoundError) as exc:
                    logger.warning("cannot play music %s: %s", path, exc)
        pygame.mixer.music.set_volume(min(volume, 1.0))


class Game:
    """The whole game: screens and menus, the gameplay level, input and drawing."""

    def __init__(
        self,
        window_size: Vec2 | None = None,
        rng: random.Random | None = None,
        asset_dir: Path | None = None,
        debug: bool = False,
    ) -> None:
        self.window_size = window_size if window_size is not None else Vec2(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.rng = rng if rng is not None else random.Random()
        self.navigator = Navigator()
        self.world: GameWorld | None = None
        self.debug = debug
        self.running = True
        self.sounds_played: deque[tuple[str, float]] = deque(maxlen=64)
        self._audio = _Audio(asset_dir)
        self._hovered: str | None = None
        self._pressed: str | None = None
        self._fonts: dict[int, pygame.font.Font] = {}

    @property
    def music(self) -> str | None:
        """The music track that should be playing right now."""
        if self.navigator.music is not None:
            return self.navigator.music
        if self.world is not None:
            return self.world.music
        return None

    @property
    def buttons(self) -> list[theme.Button]:
        """The buttons on screen, with their current interaction state."""
        return self._layout()[0]

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self._on_key(event.key)
        elif event.type == pygame.MOUSEMOTION:
            self._on_pointer_move(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._on_press(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._on_release(event.pos)

    def update(self, delta: float) -> None:
        """Advance the game by ``delta`` seconds."""
        self.navigator.tick(delta)
        self._sync_world()
        if self.world is not None:
            if not self.navigator.paused:
                self.world.update(delta)
            for path, volume in self.world.sounds:
                self._play(path, volume)
            self.world.sounds.clear()
        self._audio.set_music(self.music, self.navigator.volume)
        if self.navigator.exit_requested:
            self.running = False

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current frame onto ``surface``."""
        if not pygame.font.get_init():
            pygame.font.init()
        surface.fill(theme.to_rgb255(SPLASH_BACKGROUND_COLOR))
        if self.world is not None:
            self._draw_world(surface)
        if self.navigator.screen is Screen.SPLASH:
            self._draw_splash(surface)
        if self.navigator.paused:
            overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            overlay.fill(theme.to_rgb255(PAUSE_OVERLAY))
            surface.blit(overlay, (0, 0))

        buttons, texts = self._layout()
        for b in buttons:
            self._draw_button(surface, b)
        for text in texts:
            self._draw_text(surface, text)
        if self.debug:
            self._draw_debug(surface, buttons)

    # input

    def _on_key(self, key: int) -> None:
        if key == TOGGLE_KEY:
            self.debug = not self.debug
            return
        name = _KEYS.get(key)
        if name is not None:
            self.navigator.press(name)
            self._sync_world()

    def _button_at(self, pos: Sequence[float]) -> theme.Button | None:
        return next((b for b in self._layout()[0] if b.contains(pos)), None)

    def _on_pointer_move(self, pos: Sequence[float]) -> None:
        hit = self._button_at(pos)
        label = hit.label if hit is not None else None
        if label != self._hovered:
            self._hovered = label
            if label is not None:
                self._play_interaction(theme.HOVER_SOUND)

    def _on_press(self, pos: Sequence[float]) -> None:
        hit = self._button_at(pos)
        self._hovered = hit.label if hit is not None else None
        self._pressed = self._hovered

    def _on_release(self, pos: Sequence[float]) -> None:
        hit = self._button_at(pos)
        pressed, self._pressed = self._pressed, None
        if hit is not None:
            if hit.label == pressed:
                self._play_interaction(theme.CLICK_SOUND)
                self.navigator.activate(hit.label)
                self._sync_world()
                if self.navigator.exit_requested:
                    self.running = False
        elif pressed is None:
            self._click_world(pos)

    def _click_world(self, pos: Sequence[float]) -> None:
        if (
            self.world is not None
            and self.navigator.screen is Screen.GAMEPLAY
            and self.navigator.assets is AssetsState.GAMEPLAY_READY
        ):
            self.world.place_bomb(_screen_to_world(pos, self.window_size))

    # state

    def _sync_world(self) -> None:
        if self.navigator.screen is Screen.GAMEPLAY:
            if self.world is None:
                self.world = GameWorld(window_size=self.window_size, rng=self.rng)
        else:
            self.world = None

    def _play_interaction(self, path: str) -> None:
        if self.navigator.assets is not AssetsState.LOAD_INITIAL:
            self._play(path, 1.0)

    def _play(self, path: str, volume: float) -> None:
        effective = volume * self.navigator.volume
        self.sounds_played.append((path, effective))
        self._audio.play(path, effective)

    # layout

    def _menu_items(self) -> list[tuple[str, object]]:
        menu = self.navigator.menu
        if menu is Menu.MAIN:
            return [("button", label) for label in self.navigator.buttons()]
        if menu is Menu.CREDITS:
            return [
                ("header", "Created by"),
                ("grid", CREATED_BY),
                ("header", "Assets"),
                ("grid", ASSET_CREDITS),
                ("button", "Back"),
            ]
        if menu is Menu.SETTINGS:
            return [("header", "Settings"), ("volume", None), ("button", "Back")]
        if menu is Menu.PAUSE:
            return [
                ("header", "Game paused"),
                ("button", "Continue"),
                ("button", "Settings"),
                ("button", "Quit to title"),
            ]
        if self.navigator.screen is Screen.LOADING:
            return [("label", "Loading...")]
        return []

    @staticmethod
    def _item_height(kind: str, value: object) -> float:
        if kind == "header":
            return HEADER_HEIGHT
        if kind == "button":
            return theme.BUTTON_HEIGHT
        if kind == "grid":
            rows = len(value)  # type: ignore[arg-type]
            return rows * GRID_ROW_HEIGHT + max(rows - 1, 0) * theme.ROW_GAP
        return LABEL_HEIGHT

    def _layout(self) -> tuple[list[theme.Button], list[_Text]]:
        items = self._menu_items()
        heights = [self._item_height(kind, value) for kind, value in items]
        total = sum(heights) + theme.ROW_GAP * max(len(items) - 1, 0)
        cx = self.window_size.x / 2.0
        y = (self.window_size.y - total) / 2.0
        buttons: list[theme.Button] = []
        texts: list[_Text] = []

        for (kind, value), height in zip(items, heights):
            cy = y + height / 2.0
            if kind == "header":
                texts.append(_Text(str(value), theme.HEADER_FONT_SIZE, theme.HEADER_TEXT, cx, cy))
            elif kind == "label":
                texts.append(_Text(str(value), theme.LABEL_FONT_SIZE, theme.LABEL_TEXT, cx, cy))
            elif kind == "button":
                buttons.append(theme.button(str(value), cx - theme.BUTTON_WIDTH / 2.0, y))
            elif kind == "grid":
                for i, (text, justify) in enumerate(grid_cells(value)):  # type: ignore[arg-type]
                    row_cy = y + (i // 2) * (GRID_ROW_HEIGHT + theme.ROW_GAP) + GRID_ROW_HEIGHT / 2.0
                    if justify is JustifySelf.END:
                        x, anchor = cx - GRID_COLUMN_GAP / 2.0, "midright"
                    else:
                        x, anchor = cx + GRID_COLUMN_GAP / 2.0, "midleft"
                    texts.append(_Text(text, theme.LABEL_FONT_SIZE, theme.LABEL_TEXT, x, row_cy, anchor))
            elif kind == "volume":
                texts.append(
                    _Text(
                        "Master Volume",
                        theme.LABEL_FONT_SIZE,
                        theme.LABEL_TEXT,
                        cx - GRID_COLUMN_GAP / 2.0,
                        cy,
                        "midright",
                    )
                )
                left = cx + GRID_COLUMN_GAP / 2.0
                top = cy - theme.SMALL_BUTTON_SIZE / 2.0
                buttons.append(theme.button_small("-", left, top))
                label_x = left + theme.SMALL_BUTTON_SIZE + VOLUME_PADDING
                texts.append(
                    _Text(
                        self.navigator.volume_text,
                        theme.LABEL_FONT_SIZE,
                        theme.LABEL_TEXT,
                        label_x + VOLUME_LABEL_WIDTH / 2.0,
                        cy,
                    )
                )
                buttons.append(
                    theme.button_small("+", label_x + VOLUME_LABEL_WIDTH + VOLUME_PADDING, top)
                )
            y += height + theme.ROW_GAP

        for b in buttons:
            if b.label == self._hovered:
                pressed = b.label == self._pressed
                b.interaction = theme.Interaction.PRESSED if pressed else theme.Interaction.HOVERED
        return buttons, texts

    # drawing

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _draw_text(self, surface: pygame.Surface, text: _Text, alpha: float = 1.0) -> None:
        if not text.text:
            return
        rendered = self._font(text.size).render(text.text, True, theme.to_rgb255(text.color))
        if alpha < 1.0:
            rendered.set_alpha(round(max(alpha, 0.0) * 255))
        rect = rendered.get_rect(**{text.anchor: (round(text.x), round(text.y))})
        surface.blit(rendered, rect)

    def _draw_button(self, surface: pygame.Surface, b: theme.Button) -> None:
        rect = pygame.Rect(round(b.x), round(b.y), round(b.width), round(b.height))
        radius = rect.height // 2 if b.rounded else 0
        pygame.draw.rect(surface, theme.to_rgb255(b.background), rect, border_radius=radius)
        cx, cy = b.center
        self._draw_text(surface, _Text(b.label, theme.BUTTON_FONT_SIZE, theme.BUTTON_TEXT, cx, cy))

    @staticmethod
    def _draw_sprite(
        surface: pygame.Surface,
        center: tuple[float, float],
        size: float,
        color: Sequence[float],
        circle: bool,
    ) -> None:
        side = max(round(size), 1)
        sprite = pygame.Surface((side, side), pygame.SRCALPHA)
        rgba = theme.to_rgb255(color)
        if circle:
            pygame.draw.circle(sprite, rgba, (side // 2, side // 2), side // 2)
        else:
            sprite.fill(rgba)
        surface.blit(sprite, sprite.get_rect(center=(round(center[0]), round(center[1]))))

    def _draw_world(self, surface: pygame.Surface) -> None:
        world = self.world
        assert world is not None
        for enemy in world.enemies:
            r, g, b, a = enemy.color
            color = (ENEMY_BASE[0] * r, ENEMY_BASE[1] * g, ENEMY_BASE[2] * b, a)
            center = _world_to_screen(enemy.position, self.window_size)
            self._draw_sprite(surface, center, enemy.size, color, circle=False)
        for bomb in world.bombs:
            center = _world_to_screen(bomb.position, self.window_size)
            self._draw_sprite(surface, center, bomb.size, BOMB_COLOR, circle=True)
        for explosion in world.explosions:
            center = _world_to_screen(explosion.position, self.window_size)
            size = explosion.size * (0.5 + 0.5 * explosion.timer.fraction())
            self._draw_sprite(surface, center, size, EXPLOSION_COLOR, circle=True)

    def _draw_splash(self, surface: pygame.Surface) -> None:
        fade = self.navigator.splash_fade
        alpha = fade.alpha() if fade is not None else 1.0
        title = _Text(
            TITLE,
            theme.HEADER_FONT_SIZE * 2,
            theme.HEADER_TEXT,
            self.window_size.x / 2.0,
            self.window_size.y / 2.0,
        )
        self._draw_text(surface, title, alpha)

    def _draw_debug(self, surface: pygame.Surface, buttons: list[theme.Button]) -> None:
        outline = theme.to_rgb255(DEBUG_COLOR)
        for b in buttons:
            pygame.draw.rect(surface, outline, (round(b.x), round(b.y), round(b.width), round(b.height)), 1)
        if self.world is not None:
            for entity in (*self.world.enemies, *self.world.bombs):
                cx, cy = _world_to_screen(entity.position, self.window_size)
                half = entity.size / 2.0
                pygame.draw.rect(
                    surface, outline, (round(cx - half), round(cy - half), round(entity.size), round(entity.size)), 1
                )
        state = (
            f"{self.navigator.screen.name} / {self.navigator.menu.name} / "
            f"{self.navigator.assets.name}"
        )
        self._draw_text(surface, _Text(state, theme.LABEL_FONT_SIZE, DEBUG_COLOR, 8, 8, "topleft"))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="bomby-explody", description="Throw bombs, blow up enemies.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="directory holding sounds and music")
    parser.add_argument("--debug", action="store_true", help="start with the debug overlay on")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    pygame.init()
    try:
        screen = pygame.display.set_mode((round(SCREEN_WIDTH), round(SCREEN_HEIGHT)))
        pygame.display.set_caption(TITLE)
        asset_dir = args.assets if args.assets.is_dir() else None
        if asset_dir is None:
            logger.warning("asset directory %s not found; playing without sound", args.assets)
        game = Game(asset_dir=asset_dir, debug=args.debug)
        clock = pygame.time.Clock()
        while game.running:
            delta = clock.tick(FRAMES_PER_SECOND) / 1000.0
            for event in pygame.event.get():
                game.handle_event(event)
            game.update(delta)
            game.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0
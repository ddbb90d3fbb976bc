"""Menus and the moves between screens and menus that keys and buttons trigger."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Sequence

from .screens import AssetsState, Screen, SplashFade
from .timer import Timer, TimerMode
from .screens import SPLASH_DURATION_SECS

logger = logging.getLogger(__name__)

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1
DEFAULT_VOLUME = 1.0

KEY_ESCAPE = "escape"
KEY_PAUSE = "p"

CREDITS_MUSIC = "audio/music/Monkeys Spinning Monkeys.ogg"

CREATED_BY = (
    ("Joe Shmoe", "Implemented alligator wrestling AI"),
    ("Jane Doe", "Made the music for the alien invasion"),
)
ASSET_CREDITS = (
    ("Ducky sprite", "CC0"),
    ("Button SFX", "CC0"),
    ("Music", "CC BY 3.0"),
    ("Splash logo", "Used with permission when unmodified"),
)


class Menu(enum.Enum):
    """The menu shown on top of the current screen, if any."""

    NONE = enum.auto()
    MAIN = enum.auto()
    CREDITS = enum.auto()
    SETTINGS = enum.auto()
    PAUSE = enum.auto()


class JustifySelf(enum.Enum):
    START = "start"
    END = "end"


_BUTTONS = {
    Menu.NONE: (),
    Menu.MAIN: ("Play", "Settings", "Credits", "Exit"),
    Menu.CREDITS: ("Back",),
    Menu.SETTINGS: ("-", "+", "Back"),
    Menu.PAUSE: ("Continue", "Settings", "Quit to title"),
}


def lower_volume(volume: float) -> float:
    """One step quieter, never below the minimum."""
    return max(volume - VOLUME_STEP, MIN_VOLUME)


def raise_volume(volume: float) -> float:
    """One step louder, never above the maximum."""
    return min(volume + VOLUME_STEP, MAX_VOLUME)


def volume_label(volume: float) -> str:
    """The volume as a whole percentage, padded to three characters."""
    return f"{100.0 * volume:3.0f}%"


def grid_cells(rows: Iterable[Sequence[str]]) -> list[tuple[str, JustifySelf]]:
    """Flatten two-column rows into cells: left cells hug the right edge, right cells the left."""
    texts = (text for row in rows for text in row)
    return [
        (text, JustifySelf.END if i % 2 == 0 else JustifySelf.START)
        for i, text in enumerate(texts)
    ]


class Navigator:
    """Tracks the current screen, menu, pause and volume, and moves between them."""

    def __init__(self) -> None:
        self.screen = Screen.SPLASH
        self.menu = Menu.NONE
        self.assets = AssetsState.LOAD_INITIAL
        self.paused = False
        self.volume = DEFAULT_VOLUME
        self.exit_requested = False
        self.splash_timer: Timer | None = None
        self.splash_fade: SplashFade | None = None
        self._enter_screen(Screen.SPLASH)

    @property
    def volume_text(self) -> str:
        return volume_label(self.volume)

    @property
    def music(self) -> str | None:
        """The menu music that should be playing, if any."""
        return CREDITS_MUSIC if self.menu is Menu.CREDITS else None

    def buttons(self) -> tuple[str, ...]:
        """Labels of the buttons in the current menu, top to bottom."""
        return _BUTTONS[self.menu]

    def tick(self, delta: float) -> None:
        """Advance loading, the splash screen and the loading screen by ``delta`` seconds."""
        if self.assets.is_loading:
            self.assets = self.assets.after_loading()

        if self.screen is Screen.SPLASH and self.splash_timer is not None:
            if self.splash_fade is not None:
                self.splash_fade.tick(delta)
            if self.splash_timer.tick(delta).just_finished:
                self._set_screen(Screen.TITLE)

        if self.screen is Screen.LOADING and self.assets is AssetsState.GAMEPLAY_READY:
            logger.info("loading screen transitioning to gameplay screen")
            self._set_screen(Screen.GAMEPLAY)

    def press(self, key: str) -> None:
        """React to a key press; keys other than escape and P are ignored."""
        key = key.lower()
        screen, menu = self.screen, self.menu
        next_screen: Screen | None = None
        next_menu: Menu | None = None
        pause = False

        if key == KEY_ESCAPE:
            if screen is Screen.SPLASH:
                next_screen = Screen.TITLE
            if menu is Menu.CREDITS:
                next_menu = Menu.MAIN
            elif menu is Menu.SETTINGS:
                next_menu = self._settings_back_target()
            elif menu is Menu.PAUSE:
                next_menu = Menu.NONE

        if screen is Screen.GAMEPLAY:
            if menu is Menu.NONE and key in (KEY_ESCAPE, KEY_PAUSE):
                pause = True
                next_menu = Menu.PAUSE
            elif menu is not Menu.NONE and key == KEY_PAUSE:
                next_menu = Menu.NONE

        if pause:
            self.paused = True
        if next_screen is not None:
            self._set_screen(next_screen)
        if next_menu is not None:
            self._set_menu(next_menu)

    def activate(self, label: str) -> None:
        """Click the button labelled ``label`` in the current menu."""
        if label not in self.buttons():
            raise ValueError(f"no button {label!r} in the {self.menu.name.lower()} menu")
        menu = self.menu
        if label == "Settings":
            self._set_menu(Menu.SETTINGS)
        elif menu is Menu.MAIN:
            if label == "Play":
                ready = self.assets is AssetsState.GAMEPLAY_READY
                self._set_screen(Screen.GAMEPLAY if ready else Screen.LOADING)
            elif label == "Credits":
                self._set_menu(Menu.CREDITS)
            else:
                self.exit_requested = True
        elif menu is Menu.PAUSE:
            if label == "Continue":
                self._set_menu(Menu.NONE)
            else:
                self._set_screen(Screen.TITLE)
        elif menu is Menu.SETTINGS:
            if label == "-":
                self.volume = lower_volume(self.volume)
            elif label == "+":
                self.volume = raise_volume(self.volume)
            else:
                self._set_menu(self._settings_back_target())
        else:
            self._set_menu(Menu.MAIN)

    def _settings_back_target(self) -> Menu:
        return Menu.MAIN if self.screen is Screen.TITLE else Menu.PAUSE

    def _set_screen(self, screen: Screen) -> None:
        if screen is self.screen:
            return
        self._exit_screen(self.screen)
        self.screen = screen
        self._enter_screen(screen)

    def _exit_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            self.splash_timer = None
            self.splash_fade = None
        elif screen is Screen.TITLE:
            self._set_menu(Menu.NONE)
        elif screen is Screen.GAMEPLAY:
            self._set_menu(Menu.NONE)
            self.paused = False

    def _enter_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            self.splash_timer = Timer.from_seconds(SPLASH_DURATION_SECS, TimerMode.ONCE)
            self.splash_fade = SplashFade()
        elif screen is Screen.TITLE:
            self._set_menu(Menu.MAIN)
        elif screen is Screen.LOADING:
            logger.info("start loading gameplay assets")
            self.assets = AssetsState.LOAD_GAMEPLAY

    def _set_menu(self, menu: Menu) -> None:
        if menu is self.menu:
            return
        self.menu = menu
        if menu is Menu.NONE and self.screen is Screen.GAMEPLAY:
            self.paused = False
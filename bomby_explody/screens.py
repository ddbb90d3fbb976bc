"""Top-level screens, asset loading stages and the splash screen fade."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SPLASH_BACKGROUND_COLOR = (0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"


class Screen(enum.Enum):
    """The game's main screens; the game starts on the splash screen."""

    SPLASH = enum.auto()
    TITLE = enum.auto()
    LOADING = enum.auto()
    GAMEPLAY = enum.auto()


class AssetsState(enum.Enum):
    """Stages of asset loading; loading starts with the initial assets."""

    LOAD_INITIAL = enum.auto()
    INITIAL_READY = enum.auto()
    LOAD_GAMEPLAY = enum.auto()
    GAMEPLAY_READY = enum.auto()

    @property
    def is_loading(self) -> bool:
        return self in (AssetsState.LOAD_INITIAL, AssetsState.LOAD_GAMEPLAY)

    def after_loading(self) -> AssetsState:
        """The stage reached once this stage's assets have loaded."""
        if self is AssetsState.LOAD_INITIAL:
            logger.info("preload assets ready")
            return AssetsState.INITIAL_READY
        if self is AssetsState.LOAD_GAMEPLAY:
            logger.info("game assets ready")
            return AssetsState.GAMEPLAY_READY
        return self


@dataclass
class SplashFade:
    """Fades the splash image in, holds it, then fades it out again."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def __post_init__(self) -> None:
        if self.total_duration <= 0:
            raise ValueError(f"total duration must be positive, got {self.total_duration}")
        if self.fade_duration <= 0:
            raise ValueError(f"fade duration must be positive, got {self.fade_duration}")

    def alpha(self) -> float:
        """Opacity for the current progress: a trapezoid, flat at 1.0 in the middle."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, delta: float) -> None:
        """Advance the progress by ``delta`` seconds."""
        self.t += delta
"""Reusable UI pieces: the colour palette, button interaction colours and button layout."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Color = tuple[float, float, float]

# #ddd369
LABEL_TEXT: Color = (0.867, 0.827, 0.412)
# #fcfbcc
HEADER_TEXT: Color = (0.988, 0.984, 0.800)
# #ececec
BUTTON_TEXT: Color = (0.925, 0.925, 0.925)
# #4666bf
BUTTON_BACKGROUND: Color = (0.275, 0.400, 0.750)
# #6299d1
BUTTON_HOVERED_BACKGROUND: Color = (0.384, 0.600, 0.820)
# #3d4999
BUTTON_PRESSED_BACKGROUND: Color = (0.239, 0.286, 0.600)

HEADER_FONT_SIZE = 40
LABEL_FONT_SIZE = 24
BUTTON_FONT_SIZE = 40

BUTTON_WIDTH = 380.0
BUTTON_HEIGHT = 80.0
SMALL_BUTTON_SIZE = 30.0
ROW_GAP = 10.0

HOVER_SOUND = "audio/sound_effects/button_hover.ogg"
CLICK_SOUND = "audio/sound_effects/button_click.ogg"


def to_rgb255(color: Sequence[float]) -> tuple[int, ...]:
    """Convert 0.0-1.0 colour channels (RGB or RGBA) to 0-255 integers."""
    return tuple(round(min(max(channel, 0.0), 1.0) * 255) for channel in color)


class Interaction(enum.Enum):
    """How the pointer is currently interacting with a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours of a widget for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


BUTTON_PALETTE = InteractionPalette(
    none=BUTTON_BACKGROUND,
    hovered=BUTTON_HOVERED_BACKGROUND,
    pressed=BUTTON_PRESSED_BACKGROUND,
)


@dataclass
class Button:
    """A clickable text button occupying a rectangle in window pixels."""

    label: str
    x: float
    y: float
    width: float = BUTTON_WIDTH
    height: float = BUTTON_HEIGHT
    palette: InteractionPalette = BUTTON_PALETTE
    interaction: Interaction = Interaction.NONE
    rounded: bool = True

    @property
    def background(self) -> Color:
        return self.palette.color_for(self.interaction)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, point: Sequence[float]) -> bool:
        """Whether ``point`` lies inside the button (right and bottom edges excluded)."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


def button(label: str, x: float, y: float) -> Button:
    """A large rounded button with its top-left corner at ``(x, y)``."""
    return Button(label, x, y)


def button_small(label: str, x: float, y: float) -> Button:
    """A small square button with its top-left corner at ``(x, y)``."""
    return Button(label, x, y, SMALL_BUTTON_SIZE, SMALL_BUTTON_SIZE, rounded=False)


def layout_buttons(labels: Iterable[str], center_x: float, top: float) -> list[Button]:
    """Stack large buttons in a column centred on ``center_x``, starting at ``top``."""
    buttons = []
    y = top
    for label in labels:
        buttons.append(button(label, center_x - BUTTON_WIDTH / 2.0, y))
        y += BUTTON_HEIGHT + ROW_GAP
    return buttons
"""Buttons, interaction colours and simple vertical layout for the game's UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

from .palette import (
    BUTTON_BACKGROUND,
    BUTTON_HOVERED_BACKGROUND,
    BUTTON_PRESSED_BACKGROUND,
    BUTTON_TEXT,
    Color,
    to_rgb255,
)

LARGE_BUTTON_SIZE = (380, 80)
SMALL_BUTTON_SIZE = (30, 30)
UPGRADE_BUTTON_SIZE = (80, 32)
BUTTON_FONT_SIZE = 40
ROOT_ROW_GAP = 20


class Interaction(enum.Enum):
    """How the pointer currently relates to a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        """The background colour for ``interaction``."""
        match interaction:
            case Interaction.NONE:
                return self.none
            case Interaction.HOVERED:
                return self.hovered
            case Interaction.PRESSED:
                return self.pressed
        raise ValueError(f"unknown interaction: {interaction!r}")


BUTTON_PALETTE = InteractionPalette(
    BUTTON_BACKGROUND, BUTTON_HOVERED_BACKGROUND, BUTTON_PRESSED_BACKGROUND
)


class Button:
    """A clickable rectangle with a text label.

    A click is a press that starts on the button and is released on it.
    """

    def __init__(
        self,
        label: str,
        rect: pygame.Rect | tuple[int, int, int, int],
        action: Callable[[], object] | None = None,
        *,
        font_size: int = BUTTON_FONT_SIZE,
        palette: InteractionPalette = BUTTON_PALETTE,
        text_color: Color = BUTTON_TEXT,
        border_radius: int = 0,
    ) -> None:
        self.label = label
        self.rect = pygame.Rect(rect)
        self.action = action
        self.font_size = font_size
        self.palette = palette
        self.text_color = text_color
        self.border_radius = border_radius
        self.interaction = Interaction.NONE
        self.just_hovered = False
        self._armed = False
        self._was_pressed = False

    def __repr__(self) -> str:
        return f"Button({self.label!r}, {tuple(self.rect)}, {self.interaction.value})"

    def update(self, mouse_pos: tuple[float, float], pressed: bool) -> bool:
        """Feed the pointer state; return True and run the action on a click."""
        inside = bool(self.rect.collidepoint(mouse_pos))
        previous = self.interaction
        clicked = False
        if pressed and not self._was_pressed:
            self._armed = inside
        elif not pressed:
            clicked = self._armed and inside
            self._armed = False
        self._was_pressed = pressed

        if inside:
            self.interaction = Interaction.PRESSED if pressed else Interaction.HOVERED
        else:
            self.interaction = Interaction.NONE
        self.just_hovered = inside and previous is Interaction.NONE

        if clicked and self.action is not None:
            self.action()
        return clicked

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw the button background and its centred label."""
        color = self.palette.color_for(self.interaction)
        pygame.draw.rect(surface, to_rgb255(color), self.rect, border_radius=self.border_radius)
        text = font.render(self.label, True, to_rgb255(self.text_color))
        surface.blit(text, text.get_rect(center=self.rect.center))


def layout_column(
    sizes: Sequence[tuple[int, int]], center: tuple[int, int], gap: int
) -> list[pygame.Rect]:
    """Stack boxes of the given sizes vertically, centred on ``center``."""
    if not sizes:
        return []
    total = sum(height for _, height in sizes) + gap * (len(sizes) - 1)
    cx, cy = center
    top = cy - total // 2
    rects = []
    for width, height in sizes:
        rects.append(pygame.Rect(cx - width // 2, top, width, height))
        top += height + gap
    return rects
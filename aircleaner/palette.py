"""Colours used by the game, as sRGB(A) tuples of floats in [0, 1]."""

from __future__ import annotations

from typing import Tuple, Union

Color = Union[Tuple[float, float, float], Tuple[float, float, float, float]]


def _hex(value: int) -> tuple[float, float, float]:
    return ((value >> 16 & 0xFF) / 255.0, (value >> 8 & 0xFF) / 255.0, (value & 0xFF) / 255.0)


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

PURCHASE_ROW_BACKGROUND: Color = (0.169, 0.169, 0.169, 0.5)

CLEAR_COLOR: Color = (0.58, 0.686, 0.773)
SPLASH_BACKGROUND: Color = (0.157, 0.157, 0.157)
PAUSE_OVERLAY: Color = (0.0, 0.0, 0.0, 0.8)

WHITE: Color = (1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0)
RED: Color = (1.0, 0.0, 0.0)
GREEN: Color = _hex(0x008000)
ORANGE: Color = _hex(0xFFA500)
YELLOW_300: Color = _hex(0xFDE047)
GREEN_500: Color = _hex(0x22C55E)


def _channel(value: float) -> int:
    return int(min(max(value, 0.0), 1.0) * 255.0 + 0.5)


def _channels(color: Color) -> tuple[float, float, float, float]:
    if len(color) == 3:
        red, green, blue = color
        return red, green, blue, 1.0
    if len(color) == 4:
        red, green, blue, alpha = color
        return red, green, blue, alpha
    raise ValueError(f"a colour has 3 or 4 channels, got {len(color)}")


def to_rgb255(color: Color) -> tuple[int, int, int]:
    """Convert a colour to 8-bit red, green and blue, dropping any alpha."""
    red, green, blue, _ = _channels(color)
    return _channel(red), _channel(green), _channel(blue)


def to_rgba255(color: Color) -> tuple[int, int, int, int]:
    """Convert a colour to 8-bit RGBA; a colour without alpha is opaque."""
    red, green, blue, alpha = _channels(color)
    return _channel(red), _channel(green), _channel(blue), _channel(alpha)
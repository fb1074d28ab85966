"""
Draw-list renderer.

Games describe a frame as a list of DrawCommands in normalized space;
this module rasterizes them onto a pygame surface.
"""
from typing import Iterable, Tuple

import pygame

from models import Color, DrawCommand, Rect

BACKGROUND_COLOR = Color(r=0, g=0, b=0)


def normalized_to_screen_rect(rect: Rect, width: int, height: int) -> Tuple[int, int, int, int]:
    """Convert a normalized rectangle to pixel (left, top, width, height).

    Args:
        rect: Rectangle in [-1, 1] space, +y up
        width: Surface width in pixels
        height: Surface height in pixels

    Returns:
        Tuple usable as a pygame.Rect
    """
    left = (rect.min_x + 1.0) * 0.5 * width
    right = (rect.max_x + 1.0) * 0.5 * width
    top = (1.0 - rect.max_y) * 0.5 * height
    bottom = (1.0 - rect.min_y) * 0.5 * height
    return (
        int(round(left)),
        int(round(top)),
        max(0, int(round(right - left))),
        max(0, int(round(bottom - top))),
    )


def render_draw_list(
    surface: pygame.Surface,
    commands: Iterable[DrawCommand],
    background: Color = BACKGROUND_COLOR,
) -> None:
    """Clear the surface and fill every command's rectangle.

    Args:
        surface: Target surface (usually the display)
        commands: Draw list for this frame, painted in order
        background: Clear color
    """
    surface.fill(background.as_rgb_tuple)
    width, height = surface.get_size()

    for command in commands:
        left, top, w, h = normalized_to_screen_rect(command.rect, width, height)
        if w == 0 or h == 0:
            continue
        pygame.draw.rect(surface, command.color.as_rgb_tuple, pygame.Rect(left, top, w, h))

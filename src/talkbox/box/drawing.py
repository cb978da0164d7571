from __future__ import annotations

import pygame

from talkbox.display.color import Color
from talkbox.display.nine_slice import NineSlice
from talkbox.layout.wrap import LINE_BREAK

PROMPT_MARGIN = 20
BUTTON_PROMPT_RADIUS = 7
ARROW_PROMPT_SIZE = 10


def draw_panel(
    surface: pygame.Surface,
    x: int,
    y: int,
    width: int,
    height: int,
    skin: NineSlice | None = None,
) -> None:
    if skin is not None:
        skin.draw_in_rect(surface, x, y, width, height)
        return
    rect = pygame.Rect(x, y, width, height)
    pygame.draw.rect(surface, Color.white().tuple(), rect)
    pygame.draw.rect(surface, Color.black().tuple(), rect, width=1)


def draw_lines(
    surface: pygame.Surface,
    font: pygame.font.Font,
    x: int,
    y: int,
    text: str,
    line_height: int,
    color: Color | None = None,
) -> None:
    rgb = (color or Color.black()).tuple()
    for line in text.split(LINE_BREAK):
        if line:
            surface.blit(font.render(line, False, rgb), (x, y))
        y += line_height


def draw_button_prompt(
    surface: pygame.Surface, font: pygame.font.Font, x: int, y: int
) -> None:
    """A circled "A" with its top-left corner at ``(x, y)``."""

    centre = (x + BUTTON_PROMPT_RADIUS, y + BUTTON_PROMPT_RADIUS)
    pygame.draw.circle(surface, Color.black().tuple(), centre, BUTTON_PROMPT_RADIUS)
    glyph = font.render("A", False, Color.white().tuple())
    surface.blit(glyph, glyph.get_rect(center=centre))


def draw_arrow_prompt(
    surface: pygame.Surface, x: int, y: int, color: Color | None = None
) -> None:
    half = ARROW_PROMPT_SIZE // 2
    pygame.draw.polygon(
        surface,
        (color or Color.black()).tuple(),
        [(x, y), (x + half, y + half), (x + ARROW_PROMPT_SIZE, y)],
    )

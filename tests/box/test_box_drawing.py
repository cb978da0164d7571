"""Tests for DialogueBox drawing and drawing hooks."""

from __future__ import annotations

import pygame
from helpers.metrics import MonospaceMetrics

from talkbox.box.dialogue_box import DialogueBox
from talkbox.box.hooks import DialogueBoxHooks
from talkbox.display.nine_slice import Insets, NineSlice
from talkbox.layout.metrics import PygameFontMetrics
from talkbox.utilities.env import PromptStyle

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
RED = (255, 0, 0, 255)


def _box(**kwargs) -> DialogueBox:
    box = DialogueBox(
        "Hi there",
        120,
        40,
        8,
        font=MonospaceMetrics(char_width=8, line_height=14),
        **kwargs,
    )
    box.enable()
    return box


class TestDefaultDrawing:
    def test_background_is_white_with_black_outline(self, surface: pygame.Surface) -> None:
        surface.fill(RED)
        box = _box()

        box.draw(surface, 10, 20)

        assert surface.get_at((10, 20)) == BLACK
        assert surface.get_at((129, 59)) == BLACK
        assert surface.get_at((100, 25)) == WHITE
        assert surface.get_at((9, 19)) == RED

    def test_prompt_only_drawn_when_line_complete(self, surface: pygame.Surface) -> None:
        box = _box(prompt_style=PromptStyle.BUTTON)
        # inside the prompt circle, left of the "A" glyph
        prompt_pixel = (10 + 120 - 20 + 1, 20 + 40 - 20 + 7)

        box.draw(surface, 10, 20)
        before = surface.get_at(prompt_pixel)
        box.finish_line()
        box.draw(surface, 10, 20)

        assert before == WHITE
        assert surface.get_at(prompt_pixel) != WHITE

    def test_arrow_prompt(self, surface: pygame.Surface) -> None:
        box = _box(prompt_style=PromptStyle.ARROW)
        box.finish_line()

        box.draw(surface, 0, 0)

        assert surface.get_at((120 - 20 + 5, 40 - 20 + 1)) == BLACK

    def test_draw_is_skipped_when_disabled(self, surface: pygame.Surface) -> None:
        surface.fill(RED)
        box = _box()
        box.disable()

        box.draw(surface, 0, 0)

        assert surface.get_at((0, 0)) == RED

    def test_draw_is_a_pure_read(self, surface: pygame.Surface) -> None:
        box = _box()
        cursor = box.cursor

        box.draw(surface, 0, 0)

        assert box.cursor == cursor
        assert not box.line_complete

    def test_nine_slice_skin_replaces_the_panel(self, surface: pygame.Surface) -> None:
        image = pygame.Surface((9, 9))
        image.fill((0, 0, 255))
        box = _box(skin=NineSlice(image, Insets.uniform(3)))

        box.draw(surface, 0, 0)

        assert surface.get_at((60, 30)) == (0, 0, 255, 255)


class TestDrawingHooks:
    """Hooks replace each drawing step independently."""

    def test_hooks_receive_position_and_visible_text(self, surface: pygame.Surface) -> None:
        calls: list[tuple] = []
        hooks = DialogueBoxHooks(
            draw_background=lambda box, s, x, y: calls.append(("background", x, y)),
            draw_text=lambda box, s, x, y, text: calls.append(("text", x, y, text)),
            draw_prompt=lambda box, s, x, y: calls.append(("prompt", x, y)),
        )
        box = _box(hooks=hooks)

        box.draw(surface, 10, 20)
        box.finish_line()
        box.draw(surface, 10, 20)

        assert calls == [
            ("background", 10, 20),
            ("text", 14, 24, "H"),
            ("background", 10, 20),
            ("text", 14, 24, "Hi there"),
            ("prompt", 10, 20),
        ]

    def test_unset_hooks_fall_back_to_defaults(self, surface: pygame.Surface) -> None:
        surface.fill(RED)
        box = _box(hooks=DialogueBoxHooks(draw_text=lambda *args: None))

        box.draw(surface, 0, 0)

        assert surface.get_at((0, 0)) == BLACK

    def test_text_is_drawn_with_the_measuring_font(self) -> None:
        font = pygame.font.Font(None, 30)
        box = DialogueBox("Hi there", 120, 40, 8, font=PygameFontMetrics(font))

        assert box.render_font() is font

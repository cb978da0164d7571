from __future__ import annotations

from enum import StrEnum
from typing import Sequence

import pygame
import reactivex
from reactivex.subject import Subject

from talkbox.assets.loader import Loader
from talkbox.box import drawing
from talkbox.box.hooks import DialogueBoxHooks, LifecycleHook
from talkbox.box.input import InputEvent, InputHandlers, InputHandlerStack
from talkbox.display.nine_slice import NineSlice
from talkbox.layout.metrics import (FontFamily, FontLike, PygameFontMetrics,
                                    TextMetrics, normal_font, resolve_metrics)
from talkbox.layout.paginate import Page, process
from talkbox.reveal.engine import RevealCursor, RevealEngine, RevealEvent
from talkbox.utilities.env import Configuration, PromptStyle
from talkbox.utilities.logging import get_logger

logger = get_logger(__name__)


class DialogueEvent(StrEnum):
    OPENED = "opened"
    PAGE_COMPLETE = "page_complete"
    DIALOGUE_COMPLETE = "dialogue_complete"
    CLOSED = "closed"


_REVEAL_TO_DIALOGUE_EVENT = {
    RevealEvent.PAGE_COMPLETE: DialogueEvent.PAGE_COMPLETE,
    RevealEvent.DIALOGUE_COMPLETE: DialogueEvent.DIALOGUE_COMPLETE,
}


class DialogueBox:
    """A paginated dialogue box that types its text out a few characters per frame.

    Drive it from the game loop: dispatch input first, then call ``update``
    followed by ``draw`` once per frame while ``enabled`` is true. Changing the
    text, geometry or font rebuilds every page and restarts the dialogue.
    """

    def __init__(
        self,
        text: str | None,
        width: int,
        height: int,
        padding: int = 0,
        font: FontLike | None = None,
        *,
        speed: float | None = None,
        fast_speed: float | None = None,
        hooks: DialogueBoxHooks | None = None,
        skin: NineSlice | None = None,
        prompt_style: PromptStyle | None = None,
        input_stack: InputHandlerStack | None = None,
    ) -> None:
        self._width = width
        self._height = height
        self._padding = padding
        self._font = font
        self._font_family: FontFamily | None = None
        self._skin = skin
        self._base_speed = speed if speed is not None else Configuration.reveal_speed()
        self._speed = self._base_speed
        self.fast_speed = (
            fast_speed if fast_speed is not None else Configuration.fast_speed()
        )
        self.hooks = hooks or DialogueBoxHooks()
        self.prompt_style = prompt_style or Configuration.prompt_style()
        self.input_stack = input_stack
        self.enabled = False
        self._handlers_installed = False
        self._text: str | None = None
        self._engine = RevealEngine()
        self._events: Subject[DialogueEvent] = Subject()

        if text is not None:
            self.set_text(text)

    # ------------------------------------------------------------------
    # Text and pages
    # ------------------------------------------------------------------
    @property
    def text(self) -> str | None:
        return self._text

    @property
    def pages(self) -> tuple[Page, ...]:
        return self._engine.pages

    def set_text(self, text: str) -> None:
        if text is None:
            raise ValueError("DialogueBox text must not be None once constructed")
        self._text = text
        pages = process(
            text,
            self._width - self._padding,
            self._height - self._padding,
            self.metrics(),
        )
        logger.debug(
            "Laid out %d characters into %d pages (%dx%d, padding %d)",
            len(text),
            len(pages),
            self._width,
            self._height,
            self._padding,
        )
        self._engine.replace_pages(pages)

    def set_pages(self, pages: Sequence[Page]) -> None:
        self._engine.replace_pages(pages)

    def _relayout(self) -> None:
        if self._text is not None:
            self.set_text(self._text)

    # ------------------------------------------------------------------
    # Geometry, font and style
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    def set_width(self, width: int) -> None:
        self._width = width
        self._relayout()

    @property
    def height(self) -> int:
        return self._height

    def set_height(self, height: int) -> None:
        self._height = height
        self._relayout()

    @property
    def padding(self) -> int:
        return self._padding

    def set_padding(self, padding: int) -> None:
        self._padding = padding
        self._relayout()

    @property
    def font(self) -> FontLike | None:
        return self._font

    def set_font(self, font: FontLike | None) -> None:
        self._font = font
        self._relayout()

    @property
    def font_family(self) -> FontFamily | None:
        return self._font_family

    def set_font_family(self, font_family: FontFamily | None) -> None:
        self._font_family = font_family
        self._relayout()

    @property
    def skin(self) -> NineSlice | None:
        return self._skin

    def set_skin(self, skin: NineSlice | None) -> None:
        self._skin = skin

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def default_speed(self) -> float:
        return self._base_speed

    def set_speed(self, speed: float) -> None:
        """Set the reveal speed in characters per frame; releases return to it."""

        self._base_speed = speed
        self._speed = speed

    def metrics(self) -> TextMetrics:
        if self._font is not None:
            return resolve_metrics(self._font)
        if self._font_family is not None:
            return resolve_metrics(self._font_family)
        return resolve_metrics(Loader.load_font())

    def render_font(self) -> pygame.font.Font:
        if isinstance(self._font, (pygame.font.Font, FontFamily)):
            return normal_font(self._font)
        if isinstance(self._font, PygameFontMetrics):
            return self._font.font
        if self._font_family is not None:
            return self._font_family.normal
        return Loader.load_font()

    # ------------------------------------------------------------------
    # Reveal state and navigation
    # ------------------------------------------------------------------
    @property
    def line_complete(self) -> bool:
        return self._engine.line_complete

    @property
    def dialogue_complete(self) -> bool:
        return self._engine.dialogue_complete

    @property
    def cursor(self) -> RevealCursor:
        return self._engine.cursor

    @property
    def current_page(self) -> Page | None:
        return self._engine.current_page

    @property
    def visible_text(self) -> str:
        return self._engine.visible_text

    def restart_dialogue(self) -> None:
        self._engine.restart_dialogue()

    def finish_dialogue(self) -> None:
        self._engine.finish_dialogue()

    def restart_line(self) -> None:
        self._engine.restart_line()

    def finish_line(self) -> None:
        self._engine.finish_line()

    def next_page(self) -> bool:
        return self._engine.next_page()

    def previous_page(self) -> bool:
        return self._engine.previous_page()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def events(self) -> reactivex.Observable[DialogueEvent]:
        return self._events

    def _fire(self, event: DialogueEvent) -> None:
        hook: LifecycleHook | None = {
            DialogueEvent.OPENED: self.hooks.on_open,
            DialogueEvent.PAGE_COMPLETE: self.hooks.on_page_complete,
            DialogueEvent.DIALOGUE_COMPLETE: self.hooks.on_dialogue_complete,
            DialogueEvent.CLOSED: self.hooks.on_close,
        }[event]
        if hook is not None:
            hook(self)
        self._events.on_next(event)

    def enable(self) -> None:
        if self.enabled:
            logger.debug("DialogueBox already enabled")
            return
        self.enabled = True
        # A release swallowed by the previous close must not carry over.
        self._speed = self._base_speed
        if self.input_stack is not None:
            self.input_stack.push(self.input_handlers(), masks_previous=True)
            self._handlers_installed = True
        self._fire(DialogueEvent.OPENED)

    def disable(self) -> None:
        if not self.enabled:
            logger.debug("DialogueBox already disabled")
            return
        self.enabled = False
        if self._handlers_installed and self.input_stack is not None:
            self.input_stack.pop()
            self._handlers_installed = False
        self._fire(DialogueEvent.CLOSED)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def input_handlers(self) -> InputHandlers:
        return {
            InputEvent.CONFIRM_PRESSED: self.confirm_pressed,
            InputEvent.CONFIRM_RELEASED: self.confirm_released,
            InputEvent.SECONDARY_PRESSED: self.secondary_pressed,
            InputEvent.SECONDARY_RELEASED: self.secondary_released,
        }

    @property
    def dismissable(self) -> bool:
        """True once input should close the box; a box with no pages always is."""

        return self.dialogue_complete or not self._engine.has_pages

    def confirm_pressed(self) -> None:
        self._speed = self.fast_speed
        if self.dismissable:
            self.disable()
        elif self.line_complete:
            self.next_page()

    def confirm_released(self) -> None:
        self._speed = self._base_speed

    def secondary_pressed(self) -> None:
        if self.dismissable:
            self.disable()
        elif not self.line_complete:
            self.finish_line()
        else:
            self.next_page()
            self.finish_line()

    def secondary_released(self) -> None:
        self._speed = self._base_speed

    # ------------------------------------------------------------------
    # Frame entry points
    # ------------------------------------------------------------------
    def update(self) -> None:
        if not self.enabled or not self._engine.has_pages:
            logger.debug("Skipping update: enabled=%s pages=%d", self.enabled, len(self.pages))
            return
        for event in self._engine.tick(self._speed):
            self._fire(_REVEAL_TO_DIALOGUE_EVENT[event])

    def draw(self, surface: pygame.Surface, x: int, y: int) -> None:
        if not self.enabled or not self._engine.has_pages:
            return
        inset = self._padding // 2
        self.draw_background(surface, x, y)
        self.draw_text(surface, x + inset, y + inset, self._engine.visible_text)
        if self.line_complete:
            self.draw_prompt(surface, x, y)

    def draw_background(self, surface: pygame.Surface, x: int, y: int) -> None:
        if self.hooks.draw_background is not None:
            self.hooks.draw_background(self, surface, x, y)
            return
        drawing.draw_panel(surface, x, y, self._width, self._height, self._skin)

    def draw_text(self, surface: pygame.Surface, x: int, y: int, text: str) -> None:
        if self.hooks.draw_text is not None:
            self.hooks.draw_text(self, surface, x, y, text)
            return
        drawing.draw_lines(
            surface, self.render_font(), x, y, text, self.metrics().line_height()
        )

    def draw_prompt(self, surface: pygame.Surface, x: int, y: int) -> None:
        if self.hooks.draw_prompt is not None:
            self.hooks.draw_prompt(self, surface, x, y)
            return
        prompt_x = x + self._width - drawing.PROMPT_MARGIN
        prompt_y = y + self._height - drawing.PROMPT_MARGIN
        if self.prompt_style == PromptStyle.ARROW:
            drawing.draw_arrow_prompt(surface, prompt_x, prompt_y)
        else:
            drawing.draw_button_prompt(surface, self.render_font(), prompt_x, prompt_y)

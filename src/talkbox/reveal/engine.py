from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Sequence

from talkbox.layout.paginate import Page


class RevealEvent(StrEnum):
    PAGE_COMPLETE = "page_complete"
    DIALOGUE_COMPLETE = "dialogue_complete"


@dataclass(frozen=True, slots=True)
class RevealCursor:
    page_index: int
    char_count: float


class RevealEngine:
    """Typewriter state for a fixed set of pages.

    ``char_count`` is fractional so speeds below one character per tick work;
    the visible prefix is ``floor(char_count)`` characters long.
    """

    def __init__(self, pages: Sequence[Page] = ()) -> None:
        self._pages: tuple[Page, ...] = ()
        self.page_index = 0
        self.char_count = 0.0
        self.line_complete = False
        self.dialogue_complete = False
        self.replace_pages(pages)

    @property
    def pages(self) -> tuple[Page, ...]:
        return self._pages

    @property
    def has_pages(self) -> bool:
        return bool(self._pages)

    @property
    def last_page_index(self) -> int:
        return len(self._pages) - 1

    @property
    def current_page(self) -> Page | None:
        if not self._pages:
            return None
        return self._pages[self.page_index]

    @property
    def page_length(self) -> int:
        page = self.current_page
        return 0 if page is None else len(page)

    @property
    def cursor(self) -> RevealCursor:
        return RevealCursor(page_index=self.page_index, char_count=self.char_count)

    @property
    def visible_text(self) -> str:
        page = self.current_page
        if page is None:
            return ""
        if self.line_complete:
            return page.text
        return page.text[: math.floor(self.char_count)]

    def replace_pages(self, pages: Sequence[Page]) -> None:
        self._pages = tuple(pages)
        self.restart_dialogue()

    def _evaluate(self) -> None:
        self.line_complete = self.has_pages and self.char_count == self.page_length
        self.dialogue_complete = (
            self.line_complete and self.page_index == self.last_page_index
        )

    def tick(self, speed: float) -> tuple[RevealEvent, ...]:
        """Reveal ``speed`` more characters and report newly reached milestones."""

        if not self._pages:
            return ()

        self.char_count = min(self.char_count + speed, self.page_length)

        was_line_complete = self.line_complete
        was_dialogue_complete = self.dialogue_complete
        self._evaluate()

        events: list[RevealEvent] = []
        if self.line_complete and not was_line_complete:
            events.append(RevealEvent.PAGE_COMPLETE)
        if self.dialogue_complete and not was_dialogue_complete:
            events.append(RevealEvent.DIALOGUE_COMPLETE)
        return tuple(events)

    def restart_line(self) -> None:
        self.char_count = float(min(1, self.page_length))
        self.line_complete = False
        self.dialogue_complete = False

    def restart_dialogue(self) -> None:
        self.page_index = 0
        self.restart_line()
        # A dialogue of exactly one character is already fully shown.
        if len(self._pages) == 1 and self.page_length == 1:
            self._evaluate()

    def finish_line(self) -> None:
        if not self._pages:
            return
        self.char_count = float(self.page_length)
        self._evaluate()

    def finish_dialogue(self) -> None:
        if not self._pages:
            return
        self.page_index = self.last_page_index
        self.finish_line()

    def next_page(self) -> bool:
        if self.page_index + 1 > self.last_page_index:
            return False
        self.page_index += 1
        self.restart_line()
        return True

    def previous_page(self) -> bool:
        if self.page_index - 1 < 0:
            return False
        self.page_index -= 1
        self.restart_line()
        return True

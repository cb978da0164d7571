from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from talkbox.errors import LayoutError
from talkbox.layout.metrics import TextMetrics
from talkbox.layout.wrap import LINE_BREAK, split_lines, wrap


@dataclass(frozen=True, slots=True)
class Page:
    """Wrapped lines shown together in the dialogue box."""

    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return LINE_BREAK.join(self.lines)

    def __len__(self) -> int:
        return len(self.text)


def _line_height(metrics: TextMetrics) -> int:
    line_height = metrics.line_height()
    if line_height <= 0:
        raise LayoutError(f"line height must be positive, got {line_height}")
    return line_height


def get_rows_fractional(height: float, metrics: TextMetrics) -> float:
    return height / _line_height(metrics)


def get_rows(height: float, metrics: TextMetrics) -> int:
    """Number of whole lines that fit in ``height``; never less than one."""

    return max(1, math.floor(get_rows_fractional(height, metrics)))


def paginate(lines: Iterable[str], height: float, metrics: TextMetrics) -> tuple[Page, ...]:
    """Group wrapped ``lines`` into pages of at most ``get_rows(height)`` lines.

    A blank line ends the page being built and is not itself shown.
    """

    rows = get_rows(height, metrics)
    pages: list[Page] = []
    current: list[str] = []

    for line in lines:
        if line == "":
            if current:
                pages.append(Page(tuple(current)))
                current = []
        elif len(current) >= rows:
            pages.append(Page(tuple(current)))
            current = [line]
        else:
            current.append(line)

    if current:
        pages.append(Page(tuple(current)))

    return tuple(pages)


def process(text: str, width: float, height: float, metrics: TextMetrics) -> tuple[Page, ...]:
    """Split, wrap and paginate raw ``text`` for a box of ``width`` x ``height``."""

    wrapped = wrap(split_lines(text), width, metrics)
    return paginate(wrapped, height, metrics)


def window(lines: Sequence[str], start: int, height: float, metrics: TextMetrics) -> str:
    """Return the lines visible when scrolled to ``start`` in a box ``height`` tall."""

    if start < 0 or start >= len(lines):
        return ""
    rows = get_rows(height, metrics)
    return LINE_BREAK.join(lines[start : start + rows])

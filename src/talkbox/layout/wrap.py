from __future__ import annotations

from typing import Iterable

from talkbox.layout.metrics import TextMetrics

LINE_BREAK = "\n"
WORD_SEPARATOR = " "


def split_lines(text: str) -> list[str]:
    """Split ``text`` on explicit newlines, keeping blank lines as ``""``."""

    return text.split(LINE_BREAK)


def wrap(lines: Iterable[str], width: float, metrics: TextMetrics) -> list[str]:
    """Greedily word-wrap each of ``lines`` so it renders narrower than ``width``.

    Lines that are empty or already fit are kept as-is. Longer lines are
    rebuilt word by word; a candidate line whose width reaches ``width`` is
    pushed to the next row. A single word wider than ``width`` gets a row of
    its own rather than being split.
    """

    result: list[str] = []
    for line in lines:
        if line == "" or metrics.measure_width(line) <= width:
            result.append(line)
            continue

        current = ""
        for word in line.split():
            candidate = f"{current}{WORD_SEPARATOR}{word}" if current else word
            if metrics.measure_width(candidate) >= width and current:
                result.append(current)
                current = word
            else:
                current = candidate

        if current:
            result.append(current)

    return result

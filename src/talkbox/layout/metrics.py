from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Mapping, Protocol, runtime_checkable

import pygame


@runtime_checkable
class TextMetrics(Protocol):
    """Anything that can measure a string and report its line height in pixels."""

    def measure_width(self, text: str) -> int: ...

    def line_height(self) -> int: ...


class FontVariant(StrEnum):
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"


@dataclass(frozen=True, slots=True)
class FontFamily:
    """A set of fonts keyed by style. Layout always uses the normal variant."""

    variants: Mapping[FontVariant, pygame.font.Font] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if FontVariant.NORMAL not in self.variants:
            raise ValueError("FontFamily requires a normal variant")

    def variant(self, style: FontVariant | str = FontVariant.NORMAL) -> pygame.font.Font:
        font = self.variants.get(FontVariant(style))
        if font is None:
            return self.variants[FontVariant.NORMAL]
        return font

    @property
    def normal(self) -> pygame.font.Font:
        return self.variants[FontVariant.NORMAL]


class PygameFontMetrics:
    """``TextMetrics`` backed by a ``pygame.font.Font``.

    ``Font.get_linesize`` already includes the font's recommended leading;
    ``extra_leading`` adds spacing on top of it.
    """

    def __init__(self, font: pygame.font.Font, extra_leading: int = 0) -> None:
        self.font = font
        self.extra_leading = extra_leading

    def measure_width(self, text: str) -> int:
        if not text:
            return 0
        return self.font.size(text)[0]

    def line_height(self) -> int:
        return self.font.get_linesize() + self.extra_leading


FontLike = pygame.font.Font | FontFamily | TextMetrics


def normal_font(font: pygame.font.Font | FontFamily) -> pygame.font.Font:
    if isinstance(font, FontFamily):
        return font.normal
    return font


def resolve_metrics(font: FontLike) -> TextMetrics:
    """Return measuring capability for a font, a font family or a metrics object."""

    if isinstance(font, FontFamily):
        return PygameFontMetrics(font.normal)
    if isinstance(font, pygame.font.Font):
        return PygameFontMetrics(font)
    if isinstance(font, TextMetrics):
        return font
    raise TypeError(f"Cannot measure text with {type(font).__name__}")

from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass(frozen=True, slots=True)
class Insets:
    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def uniform(cls, inset: int) -> "Insets":
        return cls(inset, inset, inset, inset)


class NineSlice:
    """A panel image whose corners stay fixed while edges and centre stretch."""

    def __init__(self, image: pygame.Surface, insets: Insets) -> None:
        width, height = image.get_size()
        if insets.left + insets.right > width or insets.top + insets.bottom > height:
            raise ValueError(
                f"insets {insets} do not fit a {width}x{height} nine-slice image"
            )
        self.image = image
        self.insets = insets

    def _source_rects(self) -> list[pygame.Rect]:
        width, height = self.image.get_size()
        i = self.insets
        xs = (0, i.left, width - i.right, width)
        ys = (0, i.top, height - i.bottom, height)
        return [
            pygame.Rect(xs[col], ys[row], xs[col + 1] - xs[col], ys[row + 1] - ys[row])
            for row in range(3)
            for col in range(3)
        ]

    def _target_rects(self, x: int, y: int, width: int, height: int) -> list[pygame.Rect]:
        i = self.insets
        xs = (x, x + i.left, x + max(i.left, width - i.right), x + max(width, i.left + i.right))
        ys = (y, y + i.top, y + max(i.top, height - i.bottom), y + max(height, i.top + i.bottom))
        return [
            pygame.Rect(xs[col], ys[row], xs[col + 1] - xs[col], ys[row + 1] - ys[row])
            for row in range(3)
            for col in range(3)
        ]

    def draw_in_rect(
        self, surface: pygame.Surface, x: int, y: int, width: int, height: int
    ) -> None:
        for source, target in zip(
            self._source_rects(), self._target_rects(x, y, width, height)
        ):
            if source.width <= 0 or source.height <= 0:
                continue
            if target.width <= 0 or target.height <= 0:
                continue
            piece = self.image.subsurface(source)
            if piece.get_size() != target.size:
                piece = pygame.transform.scale(piece, target.size)
            surface.blit(piece, target.topleft)

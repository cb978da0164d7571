from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    @staticmethod
    def white() -> "Color":
        return Color(r=255, g=255, b=255)

    @staticmethod
    def black() -> "Color":
        return Color(r=0, g=0, b=0)

    def __post_init__(self) -> None:
        for variant in self.tuple():
            assert 0 <= variant <= 255, (
                f"Expected all color values to be between 0 and 255. Found {self.tuple()}"
            )

    def tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter(self.tuple())

    def __getitem__(self, index: int) -> int:
        return self.tuple()[index]

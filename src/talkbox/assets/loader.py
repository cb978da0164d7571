from os import PathLike
from pathlib import Path

import pygame

from talkbox.assets.cache import AssetCache
from talkbox.utilities.env import Configuration

FontKey = tuple[Path | None, int]


class Loader:
    _font_cache: AssetCache[FontKey, pygame.font.Font] | None = None
    _image_cache: AssetCache[Path, pygame.Surface] | None = None

    @classmethod
    def _get_font_cache(cls) -> AssetCache[FontKey, pygame.font.Font]:
        if cls._font_cache is None:
            cls._font_cache = AssetCache(
                Configuration.font_cache_max_entries(), name="fonts"
            )
        return cls._font_cache

    @classmethod
    def _get_image_cache(cls) -> AssetCache[Path, pygame.Surface]:
        if cls._image_cache is None:
            cls._image_cache = AssetCache(
                Configuration.image_cache_max_entries(), name="images"
            )
        return cls._image_cache

    @classmethod
    def reset_caches(cls) -> None:
        cls._font_cache = None
        cls._image_cache = None

    @classmethod
    def resolve_path(cls, path: str | PathLike[str]) -> Path:
        """Resolve ``path`` relative to ``src/talkbox/assets`` unless it is absolute."""

        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return Path(__file__).resolve().parent / candidate

    @classmethod
    def load_font(
        cls, path: str | PathLike[str] | None = None, font_size: int | None = None
    ) -> pygame.font.Font:
        """Load a font file, or pygame's bundled default font when ``path`` is None."""

        if not pygame.font.get_init():
            pygame.font.init()
        size = font_size if font_size is not None else Configuration.font_size()
        resolved_path = cls.resolve_path(path) if path is not None else None
        cache = cls._get_font_cache()
        key = (resolved_path, size)
        cached = cache.get(key)
        if cached is not None:
            return cached
        loaded = pygame.font.Font(resolved_path, size)
        cache.set(key, loaded)
        return loaded

    @classmethod
    def load_image(cls, path: str | PathLike[str]) -> pygame.Surface:
        resolved_path = cls.resolve_path(path)
        if not resolved_path.is_file():
            raise ValueError(f"'{resolved_path}' is not a file.")
        cache = cls._get_image_cache()
        cached = cache.get(resolved_path)
        if cached is not None:
            return cached
        loaded = pygame.image.load(resolved_path)
        cache.set(resolved_path, loaded)
        return loaded

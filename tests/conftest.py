import pygame
import pytest
from hypothesis import HealthCheck, settings

from talkbox.assets.loader import Loader

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def isolated_talkbox_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear talkbox env overrides so defaults are what tests see."""

    for name in (
        "TALKBOX_REVEAL_SPEED",
        "TALKBOX_FAST_SPEED",
        "TALKBOX_PROMPT_STYLE",
        "TALKBOX_UNKNOWN_OPTION",
        "TALKBOX_FONT_SIZE",
        "TALKBOX_FONT_CACHE_SIZE",
        "TALKBOX_IMAGE_CACHE_SIZE",
        "TALKBOX_LOG_DIR",
        "TALKBOX_SCREEN_WIDTH",
        "TALKBOX_SCREEN_HEIGHT",
        "TALKBOX_FPS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    Loader.reset_caches()


@pytest.fixture()
def surface() -> pygame.Surface:
    return pygame.Surface((400, 240))

from talkbox.utilities.env.parsing import _env_int

# Playdate-sized screen
DEFAULT_SCREEN_WIDTH = 400
DEFAULT_SCREEN_HEIGHT = 240
DEFAULT_FPS = 30


class DisplayConfiguration:
    @classmethod
    def screen_size(cls) -> tuple[int, int]:
        return (
            _env_int("TALKBOX_SCREEN_WIDTH", default=DEFAULT_SCREEN_WIDTH, minimum=1),
            _env_int("TALKBOX_SCREEN_HEIGHT", default=DEFAULT_SCREEN_HEIGHT, minimum=1),
        )

    @classmethod
    def fps(cls) -> int:
        return _env_int("TALKBOX_FPS", default=DEFAULT_FPS, minimum=1)

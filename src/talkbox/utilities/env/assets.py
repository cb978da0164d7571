from talkbox.utilities.env.parsing import _env_int

DEFAULT_FONT_SIZE = 16
DEFAULT_FONT_CACHE_SIZE = 8
DEFAULT_IMAGE_CACHE_SIZE = 8


class AssetsConfiguration:
    @classmethod
    def font_size(cls) -> int:
        return _env_int("TALKBOX_FONT_SIZE", default=DEFAULT_FONT_SIZE, minimum=1)

    @classmethod
    def font_cache_max_entries(cls) -> int:
        return _env_int(
            "TALKBOX_FONT_CACHE_SIZE", default=DEFAULT_FONT_CACHE_SIZE, minimum=0
        )

    @classmethod
    def image_cache_max_entries(cls) -> int:
        return _env_int(
            "TALKBOX_IMAGE_CACHE_SIZE", default=DEFAULT_IMAGE_CACHE_SIZE, minimum=0
        )

from talkbox.utilities.env.enums import PromptStyle, UnknownOptionStrategy
from talkbox.utilities.env.parsing import _env_enum, _env_float

DEFAULT_REVEAL_SPEED = 0.5  # characters per frame
DEFAULT_FAST_SPEED = 2.0


class DialogueConfiguration:
    @classmethod
    def reveal_speed(cls) -> float:
        return _env_float(
            "TALKBOX_REVEAL_SPEED", default=DEFAULT_REVEAL_SPEED, minimum=0.0
        )

    @classmethod
    def fast_speed(cls) -> float:
        return _env_float("TALKBOX_FAST_SPEED", default=DEFAULT_FAST_SPEED, minimum=0.0)

    @classmethod
    def prompt_style(cls) -> PromptStyle:
        return _env_enum(
            "TALKBOX_PROMPT_STYLE", PromptStyle, default=PromptStyle.BUTTON
        )

    @classmethod
    def unknown_option_strategy(cls) -> UnknownOptionStrategy:
        return _env_enum(
            "TALKBOX_UNKNOWN_OPTION",
            UnknownOptionStrategy,
            default=UnknownOptionStrategy.WARN,
        )

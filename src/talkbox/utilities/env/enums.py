from enum import StrEnum


class PromptStyle(StrEnum):
    BUTTON = "button"
    ARROW = "arrow"


class UnknownOptionStrategy(StrEnum):
    WARN = "warn"
    RAISE = "raise"

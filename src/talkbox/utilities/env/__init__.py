"""Environment configuration helpers."""

from talkbox.utilities.env.config import Configuration as Configuration
from talkbox.utilities.env.enums import PromptStyle as PromptStyle
from talkbox.utilities.env.enums import \
    UnknownOptionStrategy as UnknownOptionStrategy

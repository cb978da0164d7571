from functools import cache
from typing import Any, Mapping

from talkbox.box.dialogue_box import DialogueBox
from talkbox.service.options import OptionAccessor as OptionAccessor
from talkbox.service.service import DialogueService as DialogueService
from talkbox.service.service import OverrideFrame as OverrideFrame


@cache
def get_default_service() -> DialogueService:
    """The process-wide service used by ``say``; one dialogue at a time."""

    return DialogueService()


def say(text: str, config: Mapping[str, Any] | None = None) -> DialogueBox:
    return get_default_service().say(text, config)
